from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .tiles import tile_count

DEFAULT_PLAYERS = ("Alice", "Bob")
DEFAULT_MAX_VALUE = 6
# smallest max pip value that deals two players in full
MIN_FULL_DEAL_VALUE = 5


@dataclass(frozen=True)
class Ruleset:
    player_names: Tuple[str, ...] = DEFAULT_PLAYERS
    max_value: int = DEFAULT_MAX_VALUE

    def __post_init__(self) -> None:
        object.__setattr__(self, "player_names", tuple(self.player_names))
        if self.max_value < 0:
            raise ValueError(f"max_value must be >= 0, got {self.max_value}")
        if not self.player_names:
            raise ValueError("at least one player is required")
        if len(set(self.player_names)) != len(self.player_names):
            raise ValueError("player names must be unique")

    @property
    def num_players(self) -> int:
        return len(self.player_names)

    def tile_count(self) -> int:
        return tile_count(self.max_value)

    def stock_size(self) -> int:
        return 2 * (self.max_value + 1)

    def hand_size(self) -> int:
        return self.max_value + 1

    def deal_size(self) -> int:
        return self.stock_size() + self.num_players * self.hand_size()

    def is_full_deal(self) -> bool:
        return self.deal_size() <= self.tile_count()
