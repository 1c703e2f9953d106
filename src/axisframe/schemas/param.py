"""ParamConfig: Expert defaults for axisframe.

This module defines the complete default configuration. ALL tunable
parameters must have defaults here. No runtime code should define
fallback values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from axisframe.schemas.base import AxisframeBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class SelectionConfig(AxisframeBaseModel):
    """Label/position selection configuration."""
    default_join: Literal["inner", "outer"] = "inner"
    check_bounds: bool = Field(True, description="Bounds-check positions in iselect")

    @field_validator("default_join", mode="before")
    @classmethod
    def normalize_join_name(cls, v):
        """Normalize join names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class StorageConfig(AxisframeBaseModel):
    """Dense storage configuration.

    reshape_policy decides what Variable.reshape keeps:
    - "preserve": keep values element-for-element when the total element
      count is unchanged, otherwise behave like resize
    - "reset": always behave like resize
    """
    reshape_policy: Literal["preserve", "reset"] = "preserve"
    fill_value: Optional[float] = Field(None, description="Resize fill value (None means zeros)")

    @field_validator("reshape_policy", mode="before")
    @classmethod
    def normalize_policy_name(cls, v):
        """Normalize policy names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class LoggingConfig(AxisframeBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(AxisframeBaseModel):
    """Complete expert configuration with all defaults.

    This is the single source of truth for all parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)

    Runtime code only sees InternalConfig.
    """

    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
