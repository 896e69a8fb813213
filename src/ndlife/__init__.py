"""Sparse N-dimensional generalization of Conway's Game of Life."""

__version__ = "0.1.0"

from .core.vector import Vector
from .core.board import Board
from .core.game import GameOfLife
from .core.rules import Rule
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Vector", "Board", "GameOfLife", "Rule", "Pattern", "PatternLibrary"]
