#!/usr/bin/env python3
"""
Example usage of the ndlife package.
"""

from itertools import islice

from ndlife import Board, GameOfLife, PatternLibrary


def main():
    """Run the rod in seven dimensions for three generations."""
    board = Board(7)
    game = GameOfLife(board)

    library = PatternLibrary()
    rod = library.get_pattern("Rod")

    if rod:
        rod.apply_to_board(board)

        print(f"Initial population: {game.population}")
        print(f"Neighbors per cell: {len(board.offsets)}")
        print()

        # Each generation scans 3^7 - 1 offsets per candidate, so this takes a while
        for _ in range(3):
            game.step()
            print(f"Generation {game.generation}: {game.population}")

    print()
    print([tuple(cell) for cell in islice(board, 50)])

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
