"""Dominoes game engine package."""

from .rules import Ruleset
from .tiles import Tile, format_board, format_tile, generate_tiles
from .hand import Hand
from .turn import OutcomeKind, Side, TurnResult
from .state import GameEvent, GameState
from .engine import GameEngine, GameNotStartedError, UnknownPlayerError, transfer_tiles

__all__ = [
    "Ruleset",
    "Tile",
    "Hand",
    "OutcomeKind",
    "Side",
    "TurnResult",
    "GameEvent",
    "GameState",
    "GameEngine",
    "GameNotStartedError",
    "UnknownPlayerError",
    "generate_tiles",
    "format_tile",
    "format_board",
    "transfer_tiles",
]
