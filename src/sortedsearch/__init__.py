"""Search routines over sorted, randomly-indexable sequences."""

from sortedsearch.core.search import (
    lower_bound_index,
    upper_bound_index,
    binary_search_index,
    contains,
    equal_range,
)

__all__ = [
    "lower_bound_index",
    "upper_bound_index",
    "binary_search_index",
    "contains",
    "equal_range",
]
