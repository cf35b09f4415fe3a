from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .hand import Hand
from .rules import Ruleset
from .tiles import Tile


@dataclass
class GameEvent:
    player: str
    kind: str
    message: str
    tile: Optional[Tile] = None


@dataclass
class GameState:
    ruleset: Ruleset
    pool: List[Tile]
    stock: List[Tile]
    hands: Dict[str, Hand]
    board: List[Tile] = field(default_factory=list)
    winner: str = ""
    tie: bool = False
    without_stock: Set[str] = field(default_factory=set)
    event_log: List[GameEvent] = field(default_factory=list)

    def copy(self) -> "GameState":
        return GameState(
            ruleset=self.ruleset,
            pool=list(self.pool),
            stock=list(self.stock),
            hands={name: hand.copy() for name, hand in self.hands.items()},
            board=list(self.board),
            winner=self.winner,
            tie=self.tie,
            without_stock=set(self.without_stock),
            event_log=list(self.event_log),
        )

    def is_over(self) -> bool:
        return self.winner != "" or self.tie

    def tiles_in_play(self) -> int:
        return len(self.pool) + len(self.stock) + len(self.board) + sum(len(h) for h in self.hands.values())

    def state_key(self) -> Tuple:
        return (
            tuple(self.pool),
            tuple(self.stock),
            tuple((name, tuple(hand.items())) for name, hand in self.hands.items()),
            tuple(self.board),
            self.winner,
            self.tie,
            tuple(sorted(self.without_stock)),
        )

    def stable_hash(self) -> str:
        return hashlib.sha256(repr(self.state_key()).encode("utf-8")).hexdigest()
