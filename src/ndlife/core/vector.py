"""Coordinate vectors for N-dimensional lattices."""

import operator
from typing import Iterable, Sequence


class Vector(tuple):
    """Immutable integer coordinate in N dimensions.

    Vectors compare and hash exactly like the equivalent plain tuple, so a
    ``(0, 1)`` tuple finds ``Vector((0, 1))`` in a set. Components are Python
    ints, which widen as needed instead of overflowing.
    """

    __slots__ = ()

    def __new__(cls, components: Iterable[int] = ()) -> "Vector":
        """Create a vector from an iterable of integers.

        Args:
            components: One integer per axis

        Raises:
            TypeError: If a component is not an integer (bools are rejected)
        """
        values = []
        for value in components:
            if isinstance(value, bool):
                raise TypeError("Vector components must be integers, not bool")
            try:
                values.append(operator.index(value))
            except TypeError:
                raise TypeError(
                    f"Vector components must be integers, got {type(value).__name__}"
                ) from None
        return super().__new__(cls, values)

    @classmethod
    def zero(cls, dimensions: int) -> "Vector":
        """The origin in the given number of dimensions."""
        return cls([0] * dimensions)

    @property
    def dimensions(self) -> int:
        """Number of components."""
        return len(self)

    def __add__(self, other: Sequence[int]) -> "Vector":  # type: ignore[override]
        return add(self, other)

    __radd__ = __add__

    def __sub__(self, other: Sequence[int]) -> "Vector":
        return add(self, -Vector(other))

    def __neg__(self) -> "Vector":
        return tuple.__new__(Vector, [-v for v in self])

    def __repr__(self) -> str:
        return f"Vector({', '.join(str(v) for v in self)})"


def add(a: Sequence[int], b: Sequence[int]) -> Vector:
    """Add two vectors component by component.

    Args:
        a: First vector
        b: Second vector

    Returns:
        New vector whose i-th component is ``a[i] + b[i]``

    Raises:
        ValueError: If the vectors have different lengths
    """
    if len(a) != len(b):
        raise ValueError(f"Vector dimensions don't match: {len(a)} vs {len(b)}")
    return Vector(map(operator.add, a, b))


def shift(position: Vector, offset: Vector) -> Vector:
    """Add an offset to a position without validating either.

    Only for callers that already know both vectors are well-formed and of
    equal length, such as the neighbor scans of a board.
    """
    return tuple.__new__(Vector, map(operator.add, position, offset))
