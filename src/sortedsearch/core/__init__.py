"""Core search routines and sorted-sequence types."""

from sortedsearch.core.search import (
    lower_bound_index,
    upper_bound_index,
    binary_search_index,
    contains,
    equal_range,
)
from sortedsearch.core.types import SortedList, is_sorted, validate_sorted, ensure_sorted

__all__ = [
    "lower_bound_index",
    "upper_bound_index",
    "binary_search_index",
    "contains",
    "equal_range",
    "SortedList",
    "is_sorted",
    "validate_sorted",
    "ensure_sorted",
]
