from __future__ import annotations
from typing import Any, Callable, TypeVar

T = TypeVar("T")

# A predicate returning True when the first argument must sit above the second.
Predicate = Callable[[T, T], bool]


def greater_than(a: Any, b: Any) -> bool:
    """Natural maximum ordering: larger elements come out first."""
    return a > b


def less_than(a: Any, b: Any) -> bool:
    """Natural minimum ordering: smaller elements come out first."""
    return a < b
