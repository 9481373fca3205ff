"""
Optional values as a two-variant type.

``Some(value)`` holds exactly one value, ``NONE`` (the only ``Nothing``
instance) holds none. ``List.head`` returns one of them so that taking the
first element of an empty List is not a failure.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .list import List

T = TypeVar("T")
U = TypeVar("U")


def strict_equal(a: Any, b: Any) -> bool:
    """Equality that also requires matching types, recursing through eql()."""
    if type(a) is not type(b):
        return False
    eql = getattr(a, "eql", None)
    if callable(eql):
        return bool(eql(b))
    return a == b


class Maybe(Generic[T]):
    """Base of the ``Some`` and ``Nothing`` variants."""

    __slots__ = ()

    @staticmethod
    def some(value: T) -> "Some[T]":
        return Some(value)

    @staticmethod
    def none() -> "Nothing":
        return NONE

    @staticmethod
    def lift(value: Optional[T]) -> "Maybe[T]":
        """Wrap a nullable value: Python ``None`` becomes ``NONE``."""
        return NONE if value is None else Some(value)

    coerce = lift

    def eql(self, other: object) -> bool:
        """Strict equality: like ``==`` but the wrapped types must match too."""
        raise NotImplementedError

    def is_some(self) -> bool:
        raise NotImplementedError

    def is_none(self) -> bool:
        return not self.is_some()

    def fmap(self, f: Callable[[T], U]) -> "Maybe[U]":
        raise NotImplementedError

    def bind(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        raise NotImplementedError

    def value_or(self, default: U) -> Any:
        raise NotImplementedError

    def or_else(self, alternative: "Maybe[T]") -> "Maybe[T]":
        raise NotImplementedError

    def to_list(self) -> "List":
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Some(Maybe[T]):
    """Presence of exactly one value."""

    value: T

    def eql(self, other: object) -> bool:
        return isinstance(other, Some) and strict_equal(self.value, other.value)

    def is_some(self) -> bool:
        return True

    def fmap(self, f: Callable[[T], U]) -> "Some[U]":
        return Some(f(self.value))

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def value_or(self, default: U) -> T:
        return self.value

    def or_else(self, alternative: Maybe[T]) -> "Some[T]":
        return self

    def to_list(self) -> "List":
        from .list import List
        return List.of(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    __str__ = __repr__


class Nothing(Maybe[Any]):
    """Absence of a value. There is only ever one instance, ``NONE``."""

    __slots__ = ()
    _instance: Optional["Nothing"] = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def fmap(self, f: Callable[[Any], U]) -> "Nothing":
        return self

    def bind(self, f: Callable[[Any], Maybe[U]]) -> "Nothing":
        return self

    def value_or(self, default: U) -> U:
        return default

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return alternative

    def to_list(self) -> "List":
        from .list import List
        return List.empty()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    eql = __eq__

    def __hash__(self) -> int:
        return hash(Nothing)

    def __reduce__(self) -> tuple:
        return (Nothing, ())

    def __repr__(self) -> str:
        return "None"

    __str__ = __repr__


NONE = Nothing()
