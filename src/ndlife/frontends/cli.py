"""Command-line interface for the N-dimensional Game of Life."""

import argparse
import logging
import sys
import time
from itertools import islice
from typing import Optional, Tuple

from ..core.board import Board
from ..core.game import GameOfLife
from ..core.offsets import MAX_PRACTICAL_DIMENSIONS, neighborhood_size
from ..core.patterns import PatternLibrary
from ..core.rules import Rule
from ..core.vector import Vector


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        dimensions: int,
        max_generations: int,
        pattern: Optional[str] = "Rod",
        offset: Optional[Vector] = None,
        random_extent: int = 0,
        population_rate: float = 0.1,
        seed: Optional[int] = None,
        rule: Optional[Rule] = None,
        until_stable: bool = False,
        sample: int = 50,
        verbose: bool = False,
        show_board: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            dimensions: Number of spatial axes
            max_generations: Generations to run (upper bound with until_stable)
            pattern: Pattern name to seed the board with
            offset: Optional translation for the pattern
            random_extent: If positive, seed a random hypercube of this side instead
            population_rate: Random population rate (0.0-1.0)
            seed: Random seed for reproducible boards
            rule: Birth/survival rule (B3/S23 if None)
            until_stable: Stop early on extinction or a cycle
            sample: Maximum number of live cells to include in the results
            verbose: Print progress updates
            show_board: Show the plane through the origin before and after

        Returns:
            Tuple of (final_generation, finish_reason, statistics)

        Raises:
            ValueError: If the pattern is unknown or does not fit the dimension
        """
        board = Board(dimensions)
        rule = rule or Rule()

        if verbose:
            print(
                f"Initializing {dimensions}-dimensional board "
                f"({neighborhood_size(dimensions)} neighbors per cell, rule {rule})"
            )

        if random_extent > 0:
            if verbose:
                print(f"Generating random population (extent: {random_extent}, rate: {population_rate:.2%})")
            board.randomize(random_extent, population_rate, seed)
        else:
            loaded_pattern = self.pattern_library.get_pattern(pattern or "")
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")
            if verbose:
                print(f"Loading pattern '{pattern}'")
            loaded_pattern.apply_to_board(board, offset)

        # Built after seeding so the history starts from the seed
        game = GameOfLife(board, rule)
        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_board:
            print("\nInitial board (plane through origin):")
            print(str(board) or "(empty)")

        start_time = time.time()

        if until_stable:
            final_generation, reason = game.run_until_stable(max_generations)
        else:
            for _ in range(max_generations):
                game.step()
                print(f"Generation {game.generation}: {game.population} live cells")
            final_generation, reason = game.generation, "max_generations"

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population
        stats["sample"] = [tuple(cell) for cell in islice(board, sample)]

        if show_board and reason != "extinction":
            print(f"\nFinal board (generation {final_generation}):")
            print(str(board) or "(empty)")

        return final_generation, reason, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = "x".join(str(v) for v in pattern.get_size())
                    print(f"  {pattern_name}: {size}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def parse_vector(text: str) -> Vector:
    """Parse comma-separated integers such as "0,-1,2" into a vector."""
    try:
        return Vector(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid vector '{text}', expected integers like 0,1,-1")


def parse_rule(text: str) -> Rule:
    try:
        return Rule.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run N-dimensional Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the rod for 3 generations in 3 dimensions
  ndlife-cli

  # Seven dimensions, printing up to 50 live cells at the end
  ndlife-cli --dimensions 7 --sample 50

  # Blinker in 2D until it cycles
  ndlife-cli -d 2 --pattern Blinker --until-stable -m 100

  # Random 4D soup in a 6^4 hypercube
  ndlife-cli -d 4 --random 6 --population 0.2 --seed 42

  # Explicit non-Conway rule
  ndlife-cli -d 3 --rule B5/S45 --random 8

  # List available patterns
  ndlife-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-d",
        "--dimensions",
        type=int,
        default=3,
        help=f"Number of spatial dimensions 1-{MAX_PRACTICAL_DIMENSIONS} (default: 3)",
    )

    # Seeding
    parser.add_argument(
        "--pattern",
        type=str,
        default="Rod",
        help="Pattern to seed the board with (default: Rod)",
    )

    parser.add_argument(
        "--offset",
        type=parse_vector,
        help="Comma-separated translation for the pattern, one value per dimension",
    )

    parser.add_argument(
        "-r",
        "--random",
        type=int,
        default=0,
        metavar="EXTENT",
        help="Seed a random hypercube of this side length instead of a pattern",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.1,
        help="Random population rate 0.0-1.0 (default: 0.1)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible boards",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=3,
        help="Generations to simulate (default: 3)",
    )

    parser.add_argument(
        "--rule",
        type=parse_rule,
        default=Rule(),
        help="Birth/survival rule such as B3/S23 (default: B3/S23)",
    )

    parser.add_argument(
        "-u",
        "--until-stable",
        action="store_true",
        help="Stop early on extinction or a detected cycle",
    )

    # Output configuration
    parser.add_argument(
        "-s",
        "--sample",
        type=int,
        default=50,
        help="Number of live cells to print at the end (default: 50)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-b",
        "--show-board",
        action="store_true",
        help="Display the plane through the origin before and after",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for library diagnostics (default: WARNING)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from GameOfLife.run_until_stable
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Dimensions: {stats['dimensions']}")
        print(f"  Rule: {stats['rule']}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.1f} generations/second")

        if stats["bounding_box"]:
            low, high = stats["bounding_box"]
            size = "x".join(str(v) for v in stats["bounding_box_size"])
            print(f"  Bounding box: {tuple(low)} to {tuple(high)} [{size}]")
    else:
        print(
            "Population: {} -> {}, "
            "Duration: {:.3f}s".format(stats["initial_population"], stats["population"], stats.get("duration_seconds", 0))
        )

    sample = stats.get("sample", [])
    if sample:
        print(f"\nLive cells (showing {len(sample)} of {stats['population']}, unordered):")
        print(sample)


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not 1 <= args.dimensions <= MAX_PRACTICAL_DIMENSIONS:
        errors.append(f"Dimensions must be between 1 and {MAX_PRACTICAL_DIMENSIONS}")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.random < 0:
        errors.append("Random extent must be non-negative")

    if args.sample < 0:
        errors.append("Sample size must be non-negative")

    if args.offset is not None and len(args.offset) != args.dimensions:
        errors.append(f"Offset must have {args.dimensions} components, got {len(args.offset)}")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.random == 0:
        pattern = cli.pattern_library.get_pattern(args.pattern)
        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1
        if pattern.dimensions > args.dimensions:
            print(f"Error: Pattern '{args.pattern}' needs at least {pattern.dimensions} dimensions")
            return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            dimensions=args.dimensions,
            max_generations=args.max_generations,
            pattern=args.pattern,
            offset=args.offset,
            random_extent=args.random,
            population_rate=args.population,
            seed=args.seed,
            rule=args.rule,
            until_stable=args.until_stable,
            sample=args.sample,
            verbose=args.verbose,
            show_board=args.show_board,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
