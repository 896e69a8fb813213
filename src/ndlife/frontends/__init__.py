"""Frontend interfaces for N-dimensional cellular automata."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
