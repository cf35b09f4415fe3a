from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .engine import GameEngine
from .rules import DEFAULT_MAX_VALUE, DEFAULT_PLAYERS, Ruleset
from .turn import OutcomeKind

logger = logging.getLogger(__name__)


def run_game(
    ruleset: Optional[Ruleset] = None,
    seed: Optional[int] = None,
    max_turns: int = 1000,
    out: Optional[TextIO] = None,
) -> GameEngine:
    """Play every player in turn until someone wins, the game ties or ``max_turns`` runs out."""
    ruleset = ruleset or Ruleset()
    out = out or sys.stdout
    engine = GameEngine.from_ruleset(ruleset, seed=seed)

    print(engine.start_game(), file=out)
    turns = 0
    while not engine.is_over() and turns < max_turns:
        for name in ruleset.player_names:
            result = engine.play(name)
            turns += 1
            if result.message:
                print(result.message, file=out)
            if result.kind == OutcomeKind.DOMINO:
                print(engine.format_board(), file=out)
            if engine.is_over() or turns >= max_turns:
                break

    if engine.winner():
        print(engine.winner(), file=out)
    elif not engine.tie():
        logger.warning("stopped after %d turns without a result", turns)
        print(f"No result after {turns} turns", file=out)
    return engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a game of dominoes between automatic players.")
    parser.add_argument(
        "--players",
        nargs="+",
        default=list(DEFAULT_PLAYERS),
        help="Player names, in turn order.",
    )
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE, help="Highest pip value on a tile.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible game.")
    parser.add_argument("--max-turns", type=int, default=1000, help="Stop after this many turns.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log engine activity (-vv for debug).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        ruleset = Ruleset(tuple(args.players), args.max_value)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    run_game(ruleset, seed=args.seed, max_turns=args.max_turns)
    return 0


if __name__ == "__main__":
    sys.exit(main())
