"""Moore neighborhood offsets for N-dimensional lattices.

The neighborhood of a cell in N dimensions holds 3^N - 1 cells, so both
generating the offsets and scanning them grow exponentially with N. Boards
beyond roughly a dozen dimensions are not practical.
"""

import logging
from functools import lru_cache
from typing import List, Tuple

from .vector import Vector

logger = logging.getLogger(__name__)

STEPS = (-1, 0, 1)

# Largest dimension count the command-line frontend accepts
MAX_PRACTICAL_DIMENSIONS = 12


def check_dimensions(dimensions: int) -> None:
    if isinstance(dimensions, bool) or not isinstance(dimensions, int):
        raise TypeError(f"Dimensions must be an integer, got {type(dimensions).__name__}")
    if dimensions < 1:
        raise ValueError(f"Dimensions must be at least 1, got {dimensions}")


def neighborhood_size(dimensions: int) -> int:
    """Number of cells in the Moore neighborhood of a cell."""
    return 3**dimensions - 1


def generate_offsets(dimensions: int) -> Tuple[Vector, ...]:
    """Generate every offset from a cell to one of its Moore neighbors.

    Starts from the one-dimensional offsets and extends each partial vector
    with every step for each further axis, then drops the zero vector.

    Args:
        dimensions: Number of axes (at least 1)

    Returns:
        Tuple of 3^N - 1 distinct vectors with components in {-1, 0, 1}

    Raises:
        TypeError: If dimensions is not an integer
        ValueError: If dimensions is less than 1
    """
    check_dimensions(dimensions)

    partials: List[List[int]] = [[step] for step in STEPS]
    for _ in range(1, dimensions):
        partials = [partial + [step] for partial in partials for step in STEPS]

    zero = [0] * dimensions
    return tuple(Vector(partial) for partial in partials if partial != zero)


def get_offsets(dimensions: int) -> Tuple[Vector, ...]:
    """Cached offsets for the given dimension count, shared between boards."""
    check_dimensions(dimensions)
    return _cached_offsets(dimensions)


@lru_cache(maxsize=None)
def _cached_offsets(dimensions: int) -> Tuple[Vector, ...]:
    offsets = generate_offsets(dimensions)
    logger.debug("Generated %d neighbor offsets for %d dimensions", len(offsets), dimensions)
    return offsets
