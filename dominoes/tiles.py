from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

Tile = Tuple[int, int]


def iter_tiles(max_value: int) -> Iterable[Tile]:
    if max_value < 0:
        raise ValueError(f"max_value must be >= 0, got {max_value}")
    for high in range(max_value, -1, -1):
        for low in range(high, -1, -1):
            yield (high, low)


def generate_tiles(max_value: int) -> List[Tile]:
    return list(iter_tiles(max_value))


def tile_count(max_value: int) -> int:
    return (max_value + 1) * (max_value + 2) // 2


def flip(tile: Tile) -> Tile:
    return (tile[1], tile[0])


def find_face(tile: Tile, value: int) -> Optional[int]:
    """Index of the first face of ``tile`` showing ``value``, or None."""
    for idx, face in enumerate(tile):
        if face == value:
            return idx
    return None


def is_double(tile: Tile) -> bool:
    return tile[0] == tile[1]


def format_tile(tile: Tile) -> str:
    return f"<{tile[0]}:{tile[1]}>"


def format_board(board: Iterable[Tile]) -> str:
    text = "Board is now:"
    for tile in board:
        text += " " + format_tile(tile)
    return text + "."
