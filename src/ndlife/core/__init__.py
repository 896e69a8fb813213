"""Core cellular automata logic."""

from .vector import Vector, add
from .offsets import generate_offsets, get_offsets
from .board import Board
from .rules import CONWAY, Rule, empty_with_neighbors, next_generation
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Vector",
    "add",
    "generate_offsets",
    "get_offsets",
    "Board",
    "CONWAY",
    "Rule",
    "empty_with_neighbors",
    "next_generation",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
