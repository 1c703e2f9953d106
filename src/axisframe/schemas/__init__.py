"""Pydantic configuration schemas for axisframe.

This module provides strictly typed configuration models. All
configuration validation, coercion, and normalization happens at schema
validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
default_config : function
    Cached InternalConfig built from expert defaults
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from axisframe.schemas.resolve import resolve_config, default_config
from axisframe.schemas.internal import InternalConfig
from axisframe.schemas.param import ParamConfig
from axisframe.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'default_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
