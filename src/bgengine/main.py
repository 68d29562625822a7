"""Command-line entrypoint for backgammon-engine.

Provides the ``bgengine`` console script declared in ``pyproject.toml``:
``bgengine --version`` and ``bgengine play`` (one automated game).
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from bgengine import __version__
from bgengine.core.board import board_to_string
from bgengine.evaluation.agents import AGENT_FACTORIES
from bgengine.evaluation.self_play import MatchConfig, play_match


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="bgengine",
        description="Backgammon rules engine CLI",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"backgammon-engine {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for engine messages",
    )

    subparsers = parser.add_subparsers(dest="command")
    play = subparsers.add_parser("play", help="Play one game between two automated agents")
    play.add_argument("--seed", type=int, default=None, help="Seed for dice and agents")
    play.add_argument("--white", choices=sorted(AGENT_FACTORIES), default="heuristic")
    play.add_argument("--black", choices=sorted(AGENT_FACTORIES), default="random")
    play.add_argument("--max-turns", type=int, default=1000)
    play.add_argument("--verbose", action="store_true", help="Print the board after every turn")
    return parser


def config_from_args(args: argparse.Namespace) -> MatchConfig:
    return MatchConfig(
        seed=args.seed,
        max_turns=args.max_turns,
        white_agent=args.white,
        black_agent=args.black,
        verbose=args.verbose,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint used by the `bgengine` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command != "play":
        parser.print_help()
        return 0

    config = config_from_args(args)
    result = play_match(config)

    print(board_to_string(result.final_board))
    if result.winner is None:
        print(f"No winner after {result.num_turns} turns")
        return 1
    print(f"{result.winner} wins after {result.num_turns} turns ({result.num_moves} moves)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
