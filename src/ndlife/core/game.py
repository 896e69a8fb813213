"""N-dimensional Game of Life simulation driver."""

import logging
from typing import Deque, Dict, FrozenSet, List, Tuple
from collections import deque
import numpy as np

from .board import Board
from .rules import CONWAY, Rule
from .vector import Vector

logger = logging.getLogger(__name__)


class GameOfLife:
    """Game of Life simulation on a sparse N-dimensional board.

    Implements the classic rules by default, whatever the dimension:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, board: Board, rule: Rule = CONWAY) -> None:
        """Initialize the game with a board.

        Args:
            board: The board to simulate
            rule: Birth/survival rule (Conway's B3/S23 unless given)
        """
        self.board = board
        self.rule = rule
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[FrozenSet[Vector]] = deque(maxlen=1000)
        self._seen_states: Dict[FrozenSet[Vector], int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._check_for_cycles()

        self.board.advance(self.rule)

        self._generation += 1
        self._update_population_history()
        logger.debug("Generation %d: %d live cells", self._generation, self.population)

    def run(self, generations: int) -> List[int]:
        """Advance a fixed number of generations.

        Args:
            generations: Number of generations to run

        Returns:
            Population after each generation
        """
        populations = []
        for _ in range(generations):
            self.step()
            populations.append(self.population)
        return populations

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Check if the current state has been seen before (cycle detection)."""
        if self._cycle_detected:
            return

        current_state = self.board.cells

        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            logger.debug(
                "Cycle of length %d detected at generation %d", self._cycle_length, self._generation
            )
            return

        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

        # Forget the oldest states so memory stays bounded
        if len(self._state_history) > 900:
            old_state = self._state_history[0]
            if old_state in self._seen_states:
                # Only delete if it's still the first occurrence
                if self._seen_states[old_state] == self._generation - len(self._state_history) + 1:
                    del self._seen_states[old_state]

    def reset(self, clear_board: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_board: Whether to clear the board as well
        """
        if clear_board:
            self.board.clear()

        self._generation = 0
        self._population_history.clear()
        self.clear_cycle_detection()

        self._update_population_history()

    def clear_cycle_detection(self) -> None:
        """Clear cycle detection state while preserving generation and population history.

        Call this after modifying the board by hand, since earlier states no
        longer lead to the current one.
        """
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._seen_states.clear()
        self._state_history.clear()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self._cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.board.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "dimensions": self.board.dimensions,
            "rule": str(self.rule),
        }

        if bbox:
            low, high = bbox
            size = tuple(hi - lo + 1 for lo, hi in zip(low, high))
            stats["bounding_box"] = bbox
            stats["bounding_box_size"] = size
            stats["bounding_box_volume"] = int(np.prod(size, dtype=object))
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0,) * self.board.dimensions
            stats["bounding_box_volume"] = 0

        return stats
