"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains NO optional fields that runtime code depends on
(fill_value is optional by meaning: None selects zeros).
"""

from typing import Literal, Optional
from pydantic import ConfigDict
from axisframe.schemas.base import AxisframeBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalSelectionConfig(AxisframeBaseModel):
    """Runtime selection configuration."""
    default_join: Literal["inner", "outer"]
    check_bounds: bool


class InternalStorageConfig(AxisframeBaseModel):
    """Runtime storage configuration."""
    reshape_policy: Literal["preserve", "reset"]
    fill_value: Optional[float]


class InternalLoggingConfig(AxisframeBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(AxisframeBaseModel):
    """Authoritative runtime configuration.

    Variables and storages receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.reshape_policy = config.storage.reshape_policy  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation

    All of that happens during config resolution, not in runtime code.
    """

    selection: InternalSelectionConfig
    storage: InternalStorageConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
