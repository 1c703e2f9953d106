"""Configuration resolution.

resolve_config() is the only way to obtain an InternalConfig. It layers
user overrides on top of the expert defaults:

1. UserConfig (highest)
2. ParamConfig
"""

from functools import lru_cache
from typing import Optional, Union
from axisframe.schemas.param import ParamConfig
from axisframe.schemas.user import UserConfig
from axisframe.schemas.internal import InternalConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Merge `overrides` into a copy of `base`, recursing into nested dicts.

    >>> deep_merge({"storage": {"fill_value": None, "reshape_policy": "preserve"}},
    ...            {"storage": {"fill_value": 0.0}})
    {'storage': {'fill_value': 0.0, 'reshape_policy': 'preserve'}}
    """
    result = base.copy()
    for override in overrides:
        for key, value in override.items():
            nested = isinstance(result.get(key), dict) and isinstance(value, dict)
            result[key] = deep_merge(result[key], value) if nested else value
    return result


def _coerce(cfg, model):
    if cfg is None or (isinstance(cfg, dict) and not cfg):
        return model()
    if isinstance(cfg, model):
        return cfg
    return model.model_validate(cfg)


def resolve_config(
    param_cfg: Optional[Union[dict, ParamConfig]] = None,
    user_cfg: Optional[Union[dict, UserConfig]] = None,
) -> InternalConfig:
    """Build the runtime configuration.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert defaults. ParamConfig() when omitted.

    user_cfg : dict or UserConfig, optional
        Overrides. Flat aliases (DEFAULT_JOIN, RESHAPE_POLICY, ...) and
        nested sections are both accepted.

    Returns
    -------
    InternalConfig
        Frozen, fully validated.

    Raises
    ------
    pydantic.ValidationError
        If a layer, or the merged result, is invalid.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(DEFAULT_JOIN="outer"))
    >>> config.selection.default_join
    'outer'
    """
    param = _coerce(param_cfg, ParamConfig)
    user = _coerce(user_cfg, UserConfig)

    merged = deep_merge(param.model_dump(), user.to_internal_overrides())
    return InternalConfig.model_validate(merged)


@lru_cache(maxsize=1)
def default_config() -> InternalConfig:
    """InternalConfig resolved from expert defaults only (cached, immutable)."""
    return resolve_config()
