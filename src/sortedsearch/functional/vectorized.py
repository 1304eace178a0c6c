"""Vectorized search over sorted numeric arrays.

This module provides batched counterparts of the routines in
:mod:`sortedsearch.core.search`: many target values are looked up in one sorted
1-D array in a single call. All functions are JIT-compiled with JAX.

Functions:
    - **lower_bound_indices**: Per-value lower bound.
    - **upper_bound_indices**: Per-value upper bound.
    - **binary_search_indices**: Per-value match index, ``-1`` where absent.
    - **contains_many**: Per-value membership mask.

Each output element equals the scalar routine applied to the matching element
of ``values``, and the output has the shape of ``values``.

Note:
    Arrays have no ``None``, so :func:`binary_search_indices` marks absent values
    with ``-1``. Where a value occurs more than once it returns the leftmost
    occurrence, which is one of the indices the scalar routine is allowed to
    return.

Examples:
    >>> import jax.numpy as jnp
    >>> data = jnp.array([1, 2, 2, 2, 5, 7])
    >>> lower_bound_indices(data, jnp.array([2, 6]))
    Array([1, 5], dtype=int32)
    >>> binary_search_indices(data, jnp.array([5, 4]))
    Array([ 4, -1], dtype=int32)

See Also:
    - :mod:`sortedsearch.core.search`: Scalar routines over any sequence.
"""

import functools
import typing as tp

import jax
import jax.numpy as jnp
import numpy as np

__all__ = [
    "lower_bound_indices",
    "upper_bound_indices",
    "binary_search_indices",
    "contains_many",
    "to_numpy",  # Helper to get NumPy arrays out of the JAX functions
]


def _check_sorted_array(sorted_array: jax.Array) -> None:
    if sorted_array.ndim != 1:
        raise ValueError(
            f"sorted_array must be 1-D, got shape {tuple(sorted_array.shape)}."
        )


@jax.jit
def lower_bound_indices(sorted_array: jax.Array, values: jax.Array) -> jax.Array:
    """Compute the lower bound of every value in ``values``.

    Args:
        sorted_array: 1-D array sorted ascending.
        values: Array of target values, any shape.

    Returns:
        Integer array shaped like ``values``, each entry in ``[0, n]``.

    Raises:
        ValueError: If ``sorted_array`` is not 1-D.
    """
    _check_sorted_array(sorted_array)
    if sorted_array.shape[0] == 0:
        return jnp.zeros(jnp.shape(values), dtype=jnp.int32)
    return jnp.searchsorted(sorted_array, values, side="left")


@jax.jit
def upper_bound_indices(sorted_array: jax.Array, values: jax.Array) -> jax.Array:
    """Compute the upper bound of every value in ``values``.

    Args:
        sorted_array: 1-D array sorted ascending.
        values: Array of target values, any shape.

    Returns:
        Integer array shaped like ``values``, each entry in ``[0, n]``.

    Raises:
        ValueError: If ``sorted_array`` is not 1-D.
    """
    _check_sorted_array(sorted_array)
    if sorted_array.shape[0] == 0:
        return jnp.zeros(jnp.shape(values), dtype=jnp.int32)
    return jnp.searchsorted(sorted_array, values, side="right")


@jax.jit
def binary_search_indices(sorted_array: jax.Array, values: jax.Array) -> jax.Array:
    """Find a matching index for every value in ``values``.

    Args:
        sorted_array: 1-D array sorted ascending.
        values: Array of target values, any shape.

    Returns:
        Integer array shaped like ``values``: the index of the leftmost equal
        element, or ``-1`` where the value does not occur.

    Raises:
        ValueError: If ``sorted_array`` is not 1-D.
    """
    _check_sorted_array(sorted_array)
    n = sorted_array.shape[0]
    if n == 0:
        return jnp.full(jnp.shape(values), -1, dtype=jnp.int32)

    idx = jnp.searchsorted(sorted_array, values, side="left")
    # Clip so the probe stays in bounds when idx == n
    probe = sorted_array[jnp.clip(idx, 0, n - 1)]
    found = (idx < n) & (probe == values)
    return jnp.where(found, idx, -1)


@jax.jit
def contains_many(sorted_array: jax.Array, values: jax.Array) -> jax.Array:
    """Boolean mask shaped like ``values``, True where the value occurs."""
    return binary_search_indices(sorted_array, values) >= 0


def to_numpy(fn: tp.Callable[..., jax.Array]) -> tp.Callable[..., np.ndarray]:
    """Wrap one of the functions above to accept array-likes and return NumPy.

    Example:
        >>> np_lower = to_numpy(lower_bound_indices)
        >>> np_lower([1, 3, 5], [0, 3, 9])
        array([0, 1, 3], dtype=int32)
    """

    @functools.wraps(fn)
    def wrapper(sorted_array, values):
        return np.asarray(fn(jnp.asarray(sorted_array), jnp.asarray(values)))

    return wrapper
