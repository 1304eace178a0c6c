"""Search routines over sorted, randomly-indexable sequences.

This module provides the four search primitives of the package. Each routine
narrows a half-open index window ``[left, right)`` by probing its midpoint
until the window collapses (or, for exact search, until a match is probed).

Routines:
    - **lower_bound_index**: First index whose element is not less than the target.
    - **upper_bound_index**: First index whose element is greater than the target.
    - **binary_search_index**: Index of an element equal to the target, or ``None``.
    - **contains**: Whether the target occurs in the sequence.

Note:
    The sequence must be sorted ascending for the duration of the call. This is
    not checked (see :mod:`sortedsearch.core.types` for opt-in validation).
    Unsorted input still terminates and never reads outside ``[0, len)``, but
    the returned index is meaningless.

    Elements only need to support ``<``. Two elements are treated as equal when
    neither is less than the other.

Examples:
    >>> from sortedsearch.core.search import lower_bound_index, upper_bound_index
    >>> data = [1, 2, 2, 2, 5, 7]
    >>> lower_bound_index(data, 2), upper_bound_index(data, 2)
    (1, 4)
"""

from typing import Optional, Sequence, Tuple, TypeVar

from sortedsearch.core.types import SupportsLessThan

__all__ = [
    "lower_bound_index",
    "upper_bound_index",
    "binary_search_index",
    "contains",
    "equal_range",
]

T = TypeVar("T", bound=SupportsLessThan)


def lower_bound_index(sequence: Sequence[T], value: T) -> int:
    """Return the first position where ``value`` could be inserted keeping order.

    Equal elements stay to the right of the insertion point.

    Args:
        sequence: Sorted sequence to search.
        value: Target value.

    Returns:
        Index in ``[0, len(sequence)]``. ``0`` for an empty sequence or when
        ``value`` is not greater than the first element, ``len(sequence)`` when
        ``value`` is greater than every element.
    """
    left = 0
    right = len(sequence)

    while left < right:
        mid = left + (right - left) // 2
        if sequence[mid] < value:
            left = mid + 1
        else:
            right = mid

    return left


def upper_bound_index(sequence: Sequence[T], value: T) -> int:
    """Return the first position after the last occurrence of ``value``.

    Args:
        sequence: Sorted sequence to search.
        value: Target value.

    Returns:
        Index in ``[0, len(sequence)]``. Together with :func:`lower_bound_index`
        it delimits the (possibly empty) run of elements equal to ``value``.
    """
    left = 0
    right = len(sequence)

    while left < right:
        mid = left + (right - left) // 2
        if value < sequence[mid]:
            right = mid
        else:
            left = mid + 1

    return left


def binary_search_index(sequence: Sequence[T], value: T) -> Optional[int]:
    """Find an index holding an element equal to ``value``.

    When ``value`` occurs more than once, whichever occurrence the probe path
    reaches first is returned. It is not guaranteed to be the leftmost or
    rightmost one.

    Args:
        sequence: Sorted sequence to search.
        value: Target value.

    Returns:
        Index in ``[0, len(sequence))`` of a matching element, or ``None`` when
        ``value`` does not occur.
    """
    left = 0
    right = len(sequence)

    while left < right:
        mid = left + (right - left) // 2
        probe = sequence[mid]
        if probe < value:
            left = mid + 1
        elif value < probe:
            right = mid
        else:
            return mid

    return None


def contains(sequence: Sequence[T], value: T) -> bool:
    """Check whether ``value`` occurs in the sorted ``sequence``."""
    return binary_search_index(sequence, value) is not None


def equal_range(sequence: Sequence[T], value: T) -> Tuple[int, int]:
    """Return ``(lower, upper)`` bounding the run of elements equal to ``value``.

    ``sequence[lower:upper]`` holds exactly the occurrences of ``value``; the
    range is empty (``lower == upper``) when there are none.
    """
    return lower_bound_index(sequence, value), upper_bound_index(sequence, value)
