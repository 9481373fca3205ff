"""
monadic - immutable List and Maybe value types

An ordered, immutable List with coercion, concatenation, fmap/bind,
folds, filtering and sorting, plus a two-variant Maybe (Some / None)
returned by the List's safe accessors.
"""

from .list import List
from .maybe import NONE, Maybe, Nothing, Some

__version__ = "0.1.0"

__all__ = ["List", "Maybe", "Some", "Nothing", "NONE"]
