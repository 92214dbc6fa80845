#!/usr/bin/env python3
"""
Word Graph CLI - Find a path between two words, changing one letter at a time.

Usage:
    python scripts/find_path.py --source cold --destination warm
    python scripts/find_path.py --source cold --destination warm --algorithm all
    python scripts/find_path.py --words /usr/share/dict/words --source head --destination tail --algorithm dijkstra
    python scripts/find_path.py --source cat --algorithm longest --words data/small.txt

Algorithms:
    astar         - A* with the candidate word priority (fast, not always shortest)
    dijkstra      - Dijkstra's algorithm (shortest)
    bidirectional - Breadth-first search from both ends (shortest)
    longest       - Longest simple path from --source (exhaustive, small word lists only)
    all           - Run astar, dijkstra and bidirectional and compare

Priority weights (--weights D M C S):
    D  distance from the source word
    M  letters matching the destination
    C  popularity of the letter changed to
    S  popularity of the letter substitution
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wordgraph.config import (  # noqa: E402
    ALGORITHMS,
    DEFAULT_MAX_DISTANCE,
    DEFAULT_WEIGHTS,
    DEFAULT_WORDS_PATH,
    LOG_LEVEL,
)
from wordgraph.data import load_vocabulary  # noqa: E402
from wordgraph.graph import AdjacentWordGraphPathFinder, PathResult  # noqa: E402
from wordgraph.heuristics import CandidateWordPriorityCalculator  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path between two words of equal length",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--words",
        type=Path,
        default=DEFAULT_WORDS_PATH,
        help=f"Word list, one word per line (default: {DEFAULT_WORDS_PATH})",
    )
    parser.add_argument(
        "--source",
        type=str,
        required=True,
        help="Word to start from",
    )
    parser.add_argument(
        "--destination",
        type=str,
        default=None,
        help="Word to reach (not used by --algorithm longest)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="astar",
        choices=[*ALGORITHMS, "longest", "all"],
        help="Search to run (default: astar)",
    )
    parser.add_argument(
        "--weights",
        type=int,
        nargs=4,
        default=list(DEFAULT_WEIGHTS),
        metavar=("D", "M", "C", "S"),
        help="A* priority weights (default: %(default)s)",
    )
    parser.add_argument(
        "--max-distance",
        type=int,
        default=DEFAULT_MAX_DISTANCE,
        help=f"Longest source to candidate distance A* will score (default: {DEFAULT_MAX_DISTANCE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.algorithm != "longest" and not args.destination:
        parser.error("--destination is required unless --algorithm is longest")
    return args


def print_result(result: PathResult, elapsed_ms: float) -> None:
    """Print one search result."""
    print(f"\n[{result.algorithm}]")
    if result.found:
        for i, word in enumerate(result.path):
            print(f"  {i}. {word}")
        print(f"  Steps: {result.length}")
    else:
        print("  No path found")
    print(f"  Edges explored: {result.edges_explored:,}")
    print(f"  Time: {elapsed_ms:.1f}ms")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    source = args.source.lower()
    destination = args.destination.lower() if args.destination else None

    try:
        vocabulary = load_vocabulary(args.words, word_length=len(source))
        calculator = CandidateWordPriorityCalculator(
            args.max_distance,
            *args.weights,
            from_character_frequencies=vocabulary.from_character_frequencies,
            character_substitution_frequencies=vocabulary.character_substitution_frequencies,
        )
        finder = AdjacentWordGraphPathFinder(vocabulary.trie, calculator)

        for word in (source, destination):
            if word is not None and word not in vocabulary.trie:
                logger.warning(f"'{word}' is not in the word list")

        print("\n" + "=" * 60)
        print("Word Graph Path Finder")
        print("=" * 60)
        print(f"  Words:       {args.words} ({vocabulary.word_count:,} of length {len(source)})")
        print(f"  Source:      {source}")
        if destination:
            print(f"  Destination: {destination}")
        print("=" * 60)

        if args.algorithm == "longest":
            algorithms = ["longest"]
        elif args.algorithm == "all":
            algorithms = list(ALGORITHMS)
        else:
            algorithms = [args.algorithm]

        results = []
        for algorithm in algorithms:
            start_time = time.time()
            if algorithm == "longest":
                result = finder.find_longest_path_from(source)
            else:
                result = finder.find_path(source, destination, algorithm)
            print_result(result, (time.time() - start_time) * 1000)
            results.append(result)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    return 0 if all(result.found for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
