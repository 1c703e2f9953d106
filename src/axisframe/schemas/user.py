"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat aliases for the common settings (DEFAULT_JOIN, RESHAPE_POLICY,
FILL_VALUE, LOG_LEVEL) as well as nested sections for advanced users.
Users only specify what they want to override from the expert defaults.
"""

from typing import Optional
from pydantic import Field, field_validator
from axisframe.schemas.base import AxisframeBaseModel


class UserSelectionConfig(AxisframeBaseModel):
    """User-facing selection config."""
    default_join: Optional[str] = None
    check_bounds: Optional[bool] = None


class UserStorageConfig(AxisframeBaseModel):
    """User-facing storage config."""
    reshape_policy: Optional[str] = None
    fill_value: Optional[float] = None


class UserConfig(AxisframeBaseModel):
    """User-facing configuration schema.

    This config is converted to internal overrides during resolution.

    Usage
    -----
        user_cfg = UserConfig(DEFAULT_JOIN="outer", RESHAPE_POLICY="reset")
        internal = resolve_config(param_cfg, user_cfg)
    """

    # Flat aliases
    default_join: Optional[str] = Field(None, alias="DEFAULT_JOIN")
    check_bounds: Optional[bool] = Field(None, alias="CHECK_BOUNDS")
    reshape_policy: Optional[str] = Field(None, alias="RESHAPE_POLICY")
    fill_value: Optional[float] = Field(None, alias="FILL_VALUE")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    selection: Optional[UserSelectionConfig] = None
    storage: Optional[UserStorageConfig] = None

    model_config = AxisframeBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("default_join", "reshape_policy", mode="before")
    @classmethod
    def normalize_names(cls, v):
        """Normalize option names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Log levels are upper case."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        selection = {}
        if self.default_join is not None:
            selection["default_join"] = self.default_join
        if self.check_bounds is not None:
            selection["check_bounds"] = self.check_bounds
        if self.selection is not None:
            selection.update(self.selection.model_dump(exclude_none=True))
        if selection:
            overrides["selection"] = selection

        storage = {}
        if self.reshape_policy is not None:
            storage["reshape_policy"] = self.reshape_policy
        if self.fill_value is not None:
            storage["fill_value"] = self.fill_value
        if self.storage is not None:
            storage.update(self.storage.model_dump(exclude_none=True))
        if storage:
            overrides["storage"] = storage

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
