"""Birth/survival rules and the generation step for sparse boards."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Set

from .vector import Vector, shift

if TYPE_CHECKING:
    from .board import Board


def _parse_counts(text: str) -> FrozenSet[int]:
    """Parse neighbor counts, either as digits ("23") or comma separated ("2,3,10")."""
    if not text:
        return frozenset()
    try:
        if "," in text:
            return frozenset(int(part) for part in text.split(",") if part.strip())
        return frozenset(int(char) for char in text)
    except ValueError:
        raise ValueError(f"Invalid neighbor counts '{text}'") from None


@dataclass(frozen=True)
class Rule:
    """Life-like rule: the neighbor counts that give birth and survival.

    The default is Conway's B3/S23 regardless of the number of dimensions.
    """

    birth: FrozenSet[int] = frozenset({3})
    survival: FrozenSet[int] = frozenset({2, 3})

    def __post_init__(self) -> None:
        object.__setattr__(self, "birth", frozenset(self.birth))
        object.__setattr__(self, "survival", frozenset(self.survival))

        if 0 in self.birth:
            raise ValueError("Birth on 0 neighbors would fill the infinite lattice")
        if any(count < 0 for count in self.birth | self.survival):
            raise ValueError("Neighbor counts must be non-negative")

    @classmethod
    def parse(cls, notation: str) -> "Rule":
        """Parse a rule written as "B3/S23".

        Counts of 10 or more can be written comma separated, e.g. "B5,10/S4,5".

        Args:
            notation: Rule string

        Returns:
            New Rule instance

        Raises:
            ValueError: If the notation is malformed
        """
        parts = notation.strip().upper().split("/")
        if len(parts) != 2 or not parts[0].startswith("B") or not parts[1].startswith("S"):
            raise ValueError(f"Rule must look like 'B3/S23', got '{notation}'")

        return cls(birth=_parse_counts(parts[0][1:]), survival=_parse_counts(parts[1][1:]))

    def __str__(self) -> str:
        def fmt(counts: Iterable[int]) -> str:
            ordered = sorted(counts)
            sep = "," if any(count > 9 for count in ordered) else ""
            return sep.join(str(count) for count in ordered)

        return f"B{fmt(self.birth)}/S{fmt(self.survival)}"


CONWAY = Rule()


def empty_with_neighbors(board: "Board") -> Dict[Vector, int]:
    """Count live neighbors of every dead cell next to a live cell.

    Each dead position is counted once, however many live cells share it.

    Args:
        board: Board to scan

    Returns:
        Mapping from dead position to its live neighbor count
    """
    cells = board.cells
    counts: Dict[Vector, int] = {}

    for cell in cells:
        for offset in board.offsets:
            pos = shift(cell, offset)
            if pos in counts or pos in cells:
                continue
            counts[pos] = board.count_neighbors(pos)

    return counts


def next_generation(board: "Board", rule: Rule = CONWAY) -> Set[Vector]:
    """Compute the live cells of the next generation.

    Reads only the current generation, so every cell updates simultaneously.

    Args:
        board: Current board (left unmodified)
        rule: Birth/survival rule to apply

    Returns:
        Set of live cells for the next generation
    """
    candidates = empty_with_neighbors(board)
    born = {pos for pos, count in candidates.items() if count in rule.birth}
    survivors = {cell for cell in board.cells if board.count_neighbors(cell) in rule.survival}

    return survivors | born
