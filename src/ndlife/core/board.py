"""Sparse board for N-dimensional cellular automata."""

from typing import FrozenSet, Iterable, Iterator, Optional, Sequence, Set, Tuple
import numpy as np

from .offsets import get_offsets
from .rules import CONWAY, Rule, next_generation
from .vector import Vector, add, shift


class Board:
    """Represents the live cells of an unbounded N-dimensional lattice.

    Only live cells are stored, as a set of coordinate vectors, so the
    lattice has no edges. The neighbor offsets for N are shared with every
    other board of the same dimension.
    """

    def __init__(self, dimensions: int) -> None:
        """Initialize an empty board.

        Args:
            dimensions: Number of spatial axes (at least 1)

        Raises:
            ValueError: If dimensions is less than 1
        """
        self.offsets = get_offsets(dimensions)
        self.dimensions = dimensions
        self._cells: Set[Vector] = set()

    @classmethod
    def from_cells(cls, dimensions: int, cells: Iterable[Sequence[int]]) -> "Board":
        """Build a board of the given dimension with the given live cells."""
        board = cls(dimensions)
        for cell in cells:
            board.create(cell)
        return board

    @property
    def cells(self) -> FrozenSet[Vector]:
        """Snapshot of the live cells."""
        return frozenset(self._cells)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return len(self._cells)

    def _check(self, pos: Sequence[int]) -> Vector:
        """Convert a position to a vector, rejecting the wrong dimension."""
        if not isinstance(pos, Vector):
            pos = Vector(pos)
        if len(pos) != self.dimensions:
            raise ValueError(
                f"Position {tuple(pos)} has {len(pos)} components, "
                f"board has {self.dimensions} dimensions"
            )
        return pos

    def get(self, pos: Sequence[int]) -> bool:
        """Check whether a cell is alive.

        Args:
            pos: Cell coordinates

        Returns:
            True if cell is alive, False if dead

        Raises:
            ValueError: If pos does not have one component per dimension
        """
        return self._check(pos) in self._cells

    def create(self, pos: Sequence[int]) -> None:
        """Make a cell alive. Creating a live cell does nothing."""
        self._cells.add(self._check(pos))

    def kill(self, pos: Sequence[int]) -> None:
        """Make a cell dead. Killing a dead cell does nothing."""
        self._cells.discard(self._check(pos))

    def toggle(self, pos: Sequence[int]) -> bool:
        """Toggle the state of a cell.

        Args:
            pos: Cell coordinates

        Returns:
            New state of the cell
        """
        pos = self._check(pos)
        if pos in self._cells:
            self._cells.remove(pos)
            return False
        self._cells.add(pos)
        return True

    def clear(self) -> None:
        """Kill all cells."""
        self._cells.clear()

    def randomize(self, extent: int, probability: float = 0.1, seed: Optional[int] = None) -> None:
        """Randomly populate a hypercube centered on the origin.

        Every cell outside the hypercube is killed. Only the live cells are
        drawn, so memory grows with the population rather than the volume.

        Args:
            extent: Side length of the hypercube
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for reproducible boards

        Raises:
            ValueError: If extent is not positive or the hypercube has more
                cells than a 64-bit index can address
        """
        if extent <= 0:
            raise ValueError(f"Extent must be positive, got {extent}")

        shape = (extent,) * self.dimensions
        volume = extent**self.dimensions
        if volume > np.iinfo(np.int64).max:
            raise ValueError(f"Hypercube of side {extent} in {self.dimensions} dimensions is too large")

        rng = np.random.default_rng(seed)
        count = int(rng.binomial(volume, probability))
        flat = rng.choice(volume, size=count, replace=False)
        origin = Vector([-(extent // 2)] * self.dimensions)

        self._cells = {add(Vector(index), origin) for index in zip(*np.unravel_index(flat, shape))}

    def count_neighbors(self, pos: Sequence[int]) -> int:
        """Count living neighbors of a cell.

        Args:
            pos: Cell coordinates

        Returns:
            Number of living neighbors (0 to 3^N - 1)
        """
        pos = self._check(pos)
        cells = self._cells
        return sum(1 for offset in self.offsets if shift(pos, offset) in cells)

    def advance(self, rule: Rule = CONWAY) -> int:
        """Advance the board by one generation.

        The live cells are replaced in a single assignment once the whole
        next generation has been computed.

        Args:
            rule: Birth/survival rule to apply

        Returns:
            Number of living cells after the step
        """
        self._cells = next_generation(self, rule)
        return len(self._cells)

    def copy(self) -> "Board":
        """Return an independent board with the same live cells."""
        return Board.from_cells(self.dimensions, self._cells)

    def translate(self, delta: Sequence[int]) -> "Board":
        """Return a new board with every live cell moved by delta."""
        delta = self._check(delta)
        return Board.from_cells(self.dimensions, (shift(cell, delta) for cell in self._cells))

    def get_bounding_box(self) -> Optional[Tuple[Vector, Vector]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_corner, max_corner) or None if no living cells
        """
        if not self._cells:
            return None

        coords = np.array(list(self._cells))
        return Vector(coords.min(axis=0)), Vector(coords.max(axis=0))

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over live cells in no particular order."""
        return iter(self._cells)

    def __contains__(self, pos: Sequence[int]) -> bool:
        return self.get(pos)

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same dimension and live cells."""
        if not isinstance(other, Board):
            return False
        return self.dimensions == other.dimensions and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(dimensions={self.dimensions}, population={self.population})"

    def __str__(self) -> str:
        """Plane through the origin on the first two axes, live cells as '*' and dead as '.'."""
        if self.dimensions == 1:
            plane = [(cell[0], 0) for cell in self._cells]
        else:
            plane = [(cell[0], cell[1]) for cell in self._cells if not any(cell[2:])]

        if not plane:
            return ""

        xs, ys = zip(*plane)
        live = set(plane)
        result = []
        for y in range(min(ys), max(ys) + 1):
            row = []
            for x in range(min(xs), max(xs) + 1):
                row.append("*" if (x, y) in live else ".")
            result.append("".join(row))
        return "\n".join(result)
