"""
Command line interface for Minesweeper.

Usage:
    minesweeper [play]
    minesweeper evaluate [--size N] [--mines M] [--games G] [--seed S]
"""
import argparse
import logging
import sys
from typing import List, Optional

from .agents import RandomAgent
from .board import BoardConfig
from .console import ConsoleGame
from .evaluation import Evaluator


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def play(args: argparse.Namespace) -> None:
    """Play interactively on the console."""
    game = ConsoleGame()
    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Game interrupted by user")
        print()


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    config = BoardConfig(size=args.size, num_mines=args.mines)
    agent = RandomAgent(config.size, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(
        f"Evaluating Random agent over {args.games} games "
        f"({config.size}x{config.size}, {config.num_mines} mines)..."
    )
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play on the console or evaluate agents"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("play", help="Play on the console")

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--size", type=int, default=9, help="Board size (NxN)"
    )
    eval_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "evaluate":
        try:
            evaluate(args)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        play(args)


if __name__ == "__main__":
    main()
