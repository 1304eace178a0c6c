"""Reusable type definitions for sorted sequences.

This module provides the ordering protocol the search routines are generic over,
plus opt-in validators for callers who want the "sorted ascending" precondition
checked at a boundary instead of trusted.

Type Aliases:
    SortedList: A list validated by pydantic to be in non-decreasing order.

The search routines in :mod:`sortedsearch.core.search` never call these
validators.
"""

import logging
from typing import Annotated, Any, List, Protocol, Sequence

from pydantic import TypeAdapter
from pydantic.functional_validators import AfterValidator

__all__ = [
    "SupportsLessThan",
    "SortedList",
    "is_sorted",
    "validate_sorted",
    "ensure_sorted",
]

logger = logging.getLogger(__name__)


class SupportsLessThan(Protocol):
    """Anything comparable with ``<``."""

    def __lt__(self, other: Any, /) -> bool: ...


def _first_descent(sequence: Sequence[Any]) -> int:
    # Index of the first element smaller than its predecessor, -1 when sorted.
    for i in range(1, len(sequence)):
        if sequence[i] < sequence[i - 1]:
            return i
    return -1


def is_sorted(sequence: Sequence[Any]) -> bool:
    """Check that ``sequence`` is in non-decreasing order.

    Args:
        sequence: Randomly-indexable sequence of mutually comparable elements.

    Returns:
        True if no element is less than the element before it. Empty and
        single-element sequences are sorted.
    """
    return _first_descent(sequence) == -1


# Check that elements are in ascending order
def validate_sorted(sequence: Sequence[Any]) -> Sequence[Any]:
    """Validator to ensure a sequence is sorted ascending.

    Args:
        sequence: The sequence to validate.

    Returns:
        The original sequence if validation passes.

    Raises:
        ValueError: If an element is less than its predecessor, or if two
            neighbouring elements cannot be compared.
    """
    try:
        position = _first_descent(sequence)
    except TypeError as exc:
        raise ValueError(
            f"Sequence elements must be mutually comparable: {exc}"
        ) from exc
    if position != -1:
        logger.debug("Sortedness check failed at index %d", position)
        raise ValueError(
            f"Sequence must be sorted ascending. Element at index {position} "
            f"({sequence[position]!r}) is less than element at index "
            f"{position - 1} ({sequence[position - 1]!r})."
        )
    return sequence


# A list validated to be in non-decreasing order
SortedList = Annotated[List[Any], AfterValidator(validate_sorted)]

_sorted_list_adapter = TypeAdapter(SortedList)


def ensure_sorted(sequence: Sequence[Any]) -> List[Any]:
    """Validate ``sequence`` as a :data:`SortedList` and return it as a list.

    Raises:
        pydantic.ValidationError: If ``sequence`` is not a list-like of
            mutually comparable elements sorted ascending.
    """
    return _sorted_list_adapter.validate_python(sequence)
