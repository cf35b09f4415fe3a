from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .tiles import Tile


class Hand:
    """Tiles held by one player, keyed by ids that survive removals.

    Keys are handed out in increasing order and never reused, so removing a
    tile leaves the keys of the remaining tiles untouched.
    """

    def __init__(self, tiles: Optional[List[Tile]] = None) -> None:
        self._tiles: Dict[int, Tile] = {}
        self._next_key = 0
        for tile in tiles or []:
            self.append(tile)

    def append(self, tile: Tile) -> int:
        key = self._next_key
        self._tiles[key] = tile
        self._next_key += 1
        return key

    def remove(self, key: int) -> Tile:
        return self._tiles.pop(key)

    def items(self) -> List[Tuple[int, Tile]]:
        return list(self._tiles.items())

    def keys(self) -> List[int]:
        return list(self._tiles)

    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def copy(self) -> "Hand":
        other = Hand()
        other._tiles = dict(self._tiles)
        other._next_key = self._next_key
        return other

    def __getitem__(self, key: int) -> Tile:
        return self._tiles[key]

    def __contains__(self, key: object) -> bool:
        return key in self._tiles

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._tiles))

    def __len__(self) -> int:
        return len(self._tiles)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Hand) and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Hand({self._tiles!r})"
