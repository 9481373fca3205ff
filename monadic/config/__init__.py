"""
Configuration for applications using the monadic package.

Only logging output is configurable; the value types themselves have no
tunable behaviour.
"""
from .defaults import DefaultConfig, LoggingParams, get_default_config
from .loader import ConfigLoader, configure_from
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "configure_from",
    "ConfigValidator",
    "ValidationError",
]
