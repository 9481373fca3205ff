"""
Contract violation classifications for List and Maybe operations.

Every error here is a TypeError so that callers catching the builtin
still see misuse of the value types.
"""

from typing import Any, Dict, Optional


class ContractError(TypeError):
    """Base class for caller misuse of the value types."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False


class CoercionError(ContractError):
    """Input cannot be coerced into a List."""

    def __init__(self, message: str, value_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value_type = value_type


class MissingCallableError(ContractError):
    """An operation that needs a function was given none."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class UnorderableElementsError(ContractError):
    """Elements have no total ordering and cannot be sorted."""

    def __init__(self, message: str, element_types: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.element_types = element_types or []
