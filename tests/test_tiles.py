import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dominoes.hand import Hand
from dominoes.tiles import find_face, flip, format_board, format_tile, generate_tiles, tile_count


@pytest.mark.parametrize("max_value", range(0, 10))
def test_generate_tiles_covers_every_pair_once(max_value):
    tiles = generate_tiles(max_value)
    assert len(tiles) == (max_value + 1) * (max_value + 2) // 2 == tile_count(max_value)
    assert len(set(tiles)) == len(tiles)
    expected = {(i, j) for i in range(max_value + 1) for j in range(i + 1)}
    assert set(tiles) == expected


def test_generate_tiles_order_starts_from_highest_double():
    assert generate_tiles(1) == [(1, 1), (1, 0), (0, 0)]


def test_generate_tiles_rejects_negative_value():
    with pytest.raises(ValueError):
        generate_tiles(-1)


def test_find_face_returns_first_matching_position():
    assert find_face((2, 5), 2) == 0
    assert find_face((2, 5), 5) == 1
    assert find_face((4, 4), 4) == 0
    assert find_face((2, 5), 3) is None
    assert flip((2, 5)) == (5, 2)


def test_formatting():
    assert format_tile((3, 1)) == "<3:1>"
    assert format_board([(6, 3), (3, 3)]) == "Board is now: <6:3> <3:3>."
    assert format_board([]) == "Board is now:."


def test_hand_keys_survive_removal():
    hand = Hand([(1, 1), (2, 2), (3, 3)])
    assert hand.keys() == [0, 1, 2]

    assert hand.remove(1) == (2, 2)
    assert hand.keys() == [0, 2]
    assert hand[2] == (3, 3)

    assert hand.append((4, 4)) == 3
    assert hand.items() == [(0, (1, 1)), (2, (3, 3)), (3, (4, 4))]


def test_hand_keys_are_never_reused():
    hand = Hand([(1, 1)])
    hand.remove(0)
    assert len(hand) == 0
    assert hand.append((2, 2)) == 1


def test_hand_copy_is_independent():
    hand = Hand([(1, 1), (2, 2)])
    other = hand.copy()
    other.remove(0)
    assert len(hand) == 2
    assert other.append((5, 5)) == hand.append((5, 5)) == 2
