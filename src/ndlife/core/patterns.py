"""Common Game of Life patterns and pattern management.

Patterns are stored in the fewest dimensions they need and embedded into a
board of any higher dimension by padding their coordinates with zeros.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .board import Board
from .vector import Vector


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, ...]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: Coordinates of living cells, all of the same length
            description: Optional description
            metadata: Optional metadata dictionary

        Raises:
            ValueError: If the cells do not all have the same number of components
        """
        cells = [tuple(cell) for cell in cells]
        lengths = {len(cell) for cell in cells}
        if len(lengths) > 1:
            raise ValueError(f"Pattern '{name}' mixes cells of lengths {sorted(lengths)}")

        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    @property
    def dimensions(self) -> int:
        """Number of axes the pattern is defined in (0 if empty)."""
        return len(self.cells[0]) if self.cells else 0

    def embed(self, dimensions: int) -> List[Vector]:
        """Pad the pattern's cells with zeros up to the given dimension.

        Args:
            dimensions: Target number of axes

        Returns:
            List of vectors with one component per axis

        Raises:
            ValueError: If the pattern needs more dimensions than given
        """
        if self.dimensions > dimensions:
            raise ValueError(
                f"Pattern '{self.name}' needs {self.dimensions} dimensions, "
                f"board has {dimensions}"
            )

        padding = [0] * (dimensions - self.dimensions)
        return [Vector(list(cell) + padding) for cell in self.cells]

    def apply_to_board(self, board: Board, offset: Optional[Sequence[int]] = None) -> None:
        """Apply this pattern to a board, replacing its live cells.

        Args:
            board: Target board
            offset: Optional translation, one component per board dimension
        """
        cells = self.embed(board.dimensions)
        delta = Vector(offset) if offset is not None else Vector.zero(board.dimensions)

        board.clear()
        for cell in cells:
            board.create(cell + delta)

    def get_bounding_box(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_corner, max_corner)
        """
        if not self.cells:
            return ((), ())

        axes = list(zip(*self.cells))
        return tuple(min(axis) for axis in axes), tuple(max(axis) for axis in axes)

    def get_size(self) -> Tuple[int, ...]:
        """Get pattern extent along each axis."""
        low, high = self.get_bounding_box()
        return tuple(hi - lo + 1 for lo, hi in zip(low, high))

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at the origin.

        Returns:
            New Pattern instance with normalized coordinates
        """
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        low, _ = self.get_bounding_box()
        normalized_cells = [tuple(v - lo for v, lo in zip(cell, low)) for cell in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create pattern from current board state.

        Args:
            board: Source board
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = sorted(tuple(cell) for cell in board)
        metadata = {"dimensions": board.dimensions, "population": len(cells)}

        return cls(name, cells, description, metadata)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)],
                "Loaf still life",
            )
        )

        # Oscillators
        self.add_pattern(
            Pattern(
                "Rod",
                [(0, -1), (0, 0), (0, 1)],
                "Three cells through the origin; period-2 oscillator in 2D, "
                "fills a 3^(N-1) hyperplane after one generation in N dimensions",
            )
        )

        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        # Three dimensions
        self.add_pattern(
            Pattern(
                "Cube",
                [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)],
                "2x2x2 cube; every cell has 7 neighbors and dies",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Rod", "Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider"],
            "Methuselahs": ["R-pentomino"],
            "Three Dimensions": ["Cube"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
