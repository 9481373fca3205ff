"""
Immutable, ordered, finite sequence with algebraic operations.

A List is populated once from its input and never changes afterwards:
concatenation, mapping, binding, filtering, sorting and the rest all
return new Lists (or plain values). Construction::

    List[1, 2, 3]        # literal
    List.of(1, 2, 3)     # same, as a call
    List.coerce([1, 2])  # from None, a sequence or a to_list()/to_a() object
"""

from collections.abc import Sequence
import functools
from typing import Any, Callable, Iterable, Iterator, Optional

from .errors import CoercionError, ContractError, MissingCallableError, UnorderableElementsError
from .logging.config import get_logger, log_contract_violation
from .maybe import NONE, Maybe, Some, strict_equal

logger = get_logger(__name__)

# Methods through which arbitrary objects offer themselves as a sequence
CONVERSION_METHODS = ("to_list", "to_a")


def _violation(operation: str, error: ContractError) -> ContractError:
    log_contract_violation(logger, operation, error, context=error.context)
    return error


def _is_native_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _require_callable(operation: str, f: Optional[Callable[..., Any]]) -> Callable[..., Any]:
    if f is None:
        raise _violation(operation, MissingCallableError(
            f"{operation} requires a function", operation=operation
        ))
    if not callable(f):
        raise _violation(operation, MissingCallableError(
            f"{operation} expected a function, got {type(f).__name__}",
            operation=operation,
            context={"argument_type": type(f).__name__},
        ))
    return f


class List:
    """Immutable ordered sequence of values."""

    __slots__ = ("_value",)

    def __init__(self, values: Iterable[Any] = ()):
        object.__setattr__(self, "_value", tuple(values))

    def __class_getitem__(cls, items: Any) -> "List":
        # List[1, 2, 3]; List[()] is the empty List
        if not isinstance(items, tuple):
            items = (items,)
        return cls(items)

    @classmethod
    def of(cls, *values: Any) -> "List":
        return cls(values)

    @classmethod
    def empty(cls) -> "List":
        return cls()

    @classmethod
    def pure(cls, value: Any) -> "List":
        """Wrap a single value."""
        return cls((value,))

    unit = pure

    @classmethod
    def coerce(cls, value: Any) -> "List":
        """
        Convert list-like input into a List.

        Accepts None (empty List), a List, a native sequence other than
        str/bytes (its elements are copied), or any object with a
        ``to_list()`` or ``to_a()`` method returning a sequence. Anything
        else raises CoercionError. Errors raised by the conversion method
        itself propagate unchanged.
        """
        if value is None:
            return cls()
        if isinstance(value, List):
            return value
        if _is_native_sequence(value):
            return cls(value)

        for method in CONVERSION_METHODS:
            convert = getattr(value, method, None)
            if callable(convert):
                converted = convert()
                if isinstance(converted, List):
                    return converted
                if _is_native_sequence(converted):
                    return cls(converted)
                raise _violation("List.coerce", CoercionError(
                    f"{type(value).__name__}.{method}() returned "
                    f"{type(converted).__name__}, not a sequence",
                    value_type=type(value).__name__,
                    context={"method": method, "result_type": type(converted).__name__},
                ))

        raise _violation("List.coerce", CoercionError(
            f"Cannot coerce {type(value).__name__} to List",
            value_type=type(value).__name__,
        ))

    # Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple:
        return (type(self), (self._value,))

    # Equality and representation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((List, self._value))

    def eql(self, other: object) -> bool:
        """Strict equality: like ``==`` but element types must match too, at any depth."""
        if not isinstance(other, List) or len(self._value) != len(other._value):
            return False
        return all(strict_equal(a, b) for a, b in zip(self._value, other._value))

    def __repr__(self) -> str:
        return "List[" + ", ".join(repr(element) for element in self._value) + "]"

    __str__ = __repr__

    def inspect(self) -> str:
        return repr(self)

    def to_s(self) -> str:
        return repr(self)

    # Sequence protocol

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __contains__(self, item: object) -> bool:
        return item in self._value

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return List(self._value[index])
        return self._value[index]

    # Concatenation

    def __add__(self, other: Any) -> "List":
        return List(self._value + List.coerce(other)._value)

    def __radd__(self, other: Any) -> "List":
        return List(List.coerce(other)._value + self._value)

    # Conversion

    @property
    def value(self) -> tuple:
        return self._value

    def to_a(self) -> list:
        """Elements as a new Python list."""
        return list(self._value)

    to_list = to_a

    def to_monad(self) -> "List":
        return self

    # Functor and monad

    def fmap(self, f: Optional[Callable[[Any], Any]] = None) -> "List":
        """Apply ``f`` to every element."""
        func = _require_callable("List.fmap", f)
        return List(func(element) for element in self._value)

    def map(self, f: Optional[Callable[[Any], Any]] = None) -> "List":
        """Same as fmap; calling it without a function is an error."""
        func = _require_callable("List.map", f)
        return List(func(element) for element in self._value)

    def bind(self, f: Optional[Callable[[Any], Any]] = None) -> "List":
        """
        Apply ``f`` to every element and concatenate the results.

        Each result is coerced like ``List.coerce`` (so a Python list,
        a List, None or a Maybe are all fine) and flattened one level.
        """
        func = _require_callable("List.bind", f)
        results: list = []
        for element in self._value:
            results.extend(List.coerce(func(element))._value)
        return List(results)

    # Folds

    def fold_left(self, initial: Any, f: Callable[[Any, Any], Any]) -> Any:
        """``f(f(f(initial, e1), e2), e3)``; ``initial`` when empty."""
        return functools.reduce(f, self._value, initial)

    foldl = fold_left
    reduce = fold_left

    def fold_right(self, initial: Any, f: Callable[[Any, Any], Any]) -> Any:
        """``f(e1, f(e2, f(e3, initial)))``; ``initial`` when empty."""
        return functools.reduce(lambda acc, element: f(element, acc), reversed(self._value), initial)

    foldr = fold_right

    # Filtering, ordering, size

    def filter(self, predicate: Callable[[Any], Any]) -> "List":
        return List(element for element in self._value if predicate(element))

    select = filter

    def sort(self, key: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> "List":
        """Stable ascending sort by natural ordering (or by ``key``)."""
        try:
            return List(sorted(self._value, key=key, reverse=reverse))
        except TypeError as e:
            element_types = sorted({type(element).__name__ for element in self._value})
            raise _violation("List.sort", UnorderableElementsError(
                f"Elements cannot be ordered: {e}",
                element_types=element_types,
            )) from e

    @property
    def size(self) -> int:
        return len(self._value)

    def reverse(self) -> "List":
        return List(reversed(self._value))

    def is_empty(self) -> bool:
        return not self._value

    # Positional access

    def first(self) -> Optional[Any]:
        """First element, or None when empty."""
        return self._value[0] if self._value else None

    def last(self) -> Optional[Any]:
        """Last element, or None when empty."""
        return self._value[-1] if self._value else None

    def head(self) -> Maybe:
        """First element as Some, or NONE when empty."""
        return Some(self._value[0]) if self._value else NONE

    def tail(self) -> "List":
        """Everything but the first element; empty stays empty."""
        return List(self._value[1:])
