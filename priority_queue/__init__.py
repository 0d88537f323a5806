from .heap import PriorityQueue
from .ordering import Predicate, greater_than, less_than

__all__ = [
    "PriorityQueue",
    "Predicate",
    "greater_than",
    "less_than",
]
