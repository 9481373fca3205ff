"""
Error classification for the monadic value types.

Contract violations are caller bugs: they are raised immediately and
never recovered from. Configuration errors come from the config loader.
"""

from .contract import (
    ContractError,
    CoercionError,
    MissingCallableError,
    UnorderableElementsError,
)
from .configuration import ConfigurationError

__all__ = [
    # Contract violations
    "ContractError",
    "CoercionError",
    "MissingCallableError",
    "UnorderableElementsError",
    # Configuration
    "ConfigurationError",
]
