"""Tests for rules and the generation step."""

import pytest
from ndlife.core.board import Board
from ndlife.core.rules import CONWAY, Rule, empty_with_neighbors, next_generation


BLOCK = [(0, 0), (0, 1), (1, 0), (1, 1)]
ROD = [(0, -1), (0, 0), (0, 1)]


class TestRule:
    """Test cases for the Rule class."""

    def test_default_is_conway(self):
        """Test the default rule is B3/S23."""
        assert CONWAY == Rule()
        assert CONWAY.birth == {3}
        assert CONWAY.survival == {2, 3}
        assert str(CONWAY) == "B3/S23"

    def test_parse(self):
        """Test parsing rule notation."""
        rule = Rule.parse("B36/S23")
        assert rule.birth == {3, 6}
        assert rule.survival == {2, 3}
        assert Rule.parse("b3/s23") == CONWAY

    def test_parse_large_counts(self):
        """Test comma separated counts above 9."""
        rule = Rule.parse("B5,10/S4,5,12")
        assert rule.birth == {5, 10}
        assert rule.survival == {4, 5, 12}
        assert str(rule) == "B5,10/S4,5,12"

    def test_parse_empty_survival(self):
        """Test rules where nothing survives."""
        rule = Rule.parse("B2/S")
        assert rule.survival == frozenset()
        assert str(rule) == "B2/S"

    @pytest.mark.parametrize("notation", ["", "B3", "S23/B3", "B3/S2x", "23/3"])
    def test_parse_invalid(self, notation):
        """Test malformed rule strings."""
        with pytest.raises(ValueError):
            Rule.parse(notation)

    def test_birth_on_zero_rejected(self):
        """Test B0 is rejected on an infinite lattice."""
        with pytest.raises(ValueError):
            Rule.parse("B03/S23")

    def test_frozen(self):
        """Test rules cannot be modified."""
        with pytest.raises(AttributeError):
            CONWAY.birth = frozenset({1})


class TestEmptyWithNeighbors:
    """Test cases for the dead-candidate scan."""

    def test_single_cell(self):
        """Test every neighbor of a lone cell is a candidate with count 1."""
        board = Board.from_cells(2, [(0, 0)])
        counts = empty_with_neighbors(board)

        assert len(counts) == 8
        assert set(counts.values()) == {1}
        assert (0, 0) not in counts

    def test_live_cells_excluded(self):
        """Test live cells never appear as candidates."""
        board = Board.from_cells(2, ROD)
        counts = empty_with_neighbors(board)

        assert not set(counts) & set(ROD)
        assert counts[(1, 0)] == 3
        assert counts[(-1, 0)] == 3
        assert counts[(1, 2)] == 1

    def test_shared_candidates_counted_once(self):
        """Test a dead cell next to several live cells has one entry."""
        board = Board.from_cells(1, [(0,), (2,)])
        counts = empty_with_neighbors(board)

        assert counts == {(-1,): 1, (1,): 2, (3,): 1}

    def test_empty_board(self):
        """Test no candidates on an empty board."""
        assert empty_with_neighbors(Board(3)) == {}


class TestNextGeneration:
    """Test cases for the generation step."""

    def test_still_life(self):
        """Test the block is unchanged."""
        board = Board.from_cells(2, BLOCK)
        assert next_generation(board) == set(BLOCK)

    def test_oscillator(self):
        """Test the rod turns sideways."""
        board = Board.from_cells(2, ROD)
        assert next_generation(board) == {(-1, 0), (0, 0), (1, 0)}

    def test_board_not_modified(self):
        """Test the current board is only read."""
        board = Board.from_cells(2, ROD)
        next_generation(board)
        assert board.cells == set(ROD)

    def test_custom_rule(self):
        """Test a rule where nothing survives."""
        board = Board.from_cells(2, BLOCK)
        assert next_generation(board, Rule.parse("B3/S")) == set()


class TestAdvance:
    """Test cases for Board.advance."""

    def test_isolated_cell_dies(self):
        """Test a lone cell has no neighbors and dies."""
        for dimensions in (1, 2, 3, 5):
            board = Board(dimensions)
            board.create((7,) * dimensions)
            assert board.advance() == 0
            assert board.population == 0

    def test_block_still_life(self):
        """Test the 2D block is unchanged by one generation."""
        board = Board.from_cells(2, BLOCK)
        board.advance()
        assert board.cells == set(BLOCK)

    def test_rod_oscillator(self):
        """Test the 2D rod differs after one generation and returns after two."""
        board = Board.from_cells(2, ROD)
        original = board.cells

        board.advance()
        assert board.cells != original
        assert board.population == 3

        board.advance()
        assert board.cells == original

    def test_deterministic(self):
        """Test identical boards advance to identical boards."""
        cells = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 1), (2, 0, 1), (-1, 2, 0)]
        first = Board.from_cells(3, cells)
        second = Board.from_cells(3, reversed(cells))

        for _ in range(3):
            first.advance()
            second.advance()
            assert first == second

    @pytest.mark.parametrize("dimensions", [3, 4, 5])
    def test_rod_fills_hyperplane(self, dimensions):
        """Test the rod becomes the full 3^(N-1) hyperplane through its middle."""
        board = Board(dimensions)
        for y in (-1, 0, 1):
            cell = [0] * dimensions
            cell[1] = y
            board.create(cell)

        assert board.advance() == 3 ** (dimensions - 1)
        for cell in board:
            assert cell[1] == 0
            assert all(abs(c) <= 1 for c in cell)

    def test_cube_dies(self):
        """Test every cell of a 2x2x2 cube is overcrowded."""
        cells = [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
        board = Board.from_cells(3, cells)
        assert board.advance() == 0
