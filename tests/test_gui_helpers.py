import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dominoes.engine import GameEngine
from dominoes.gui import TimelineController, next_player, resolve_screenshot_path, wrap_board


def test_next_player_cycles_in_order():
    names = ("Alice", "Bob", "Carol")
    assert next_player(names, None) == "Alice"
    assert next_player(names, "Alice") == "Bob"
    assert next_player(names, "Carol") == "Alice"


def test_wrap_board_keeps_chain_order():
    board = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    assert wrap_board(board, 2) == [[(1, 2), (2, 3)], [(3, 4), (4, 5)], [(5, 6)]]
    assert wrap_board([], 3) == []
    with pytest.raises(ValueError):
        wrap_board(board, 0)


def test_timeline_controller_appends_and_jumps():
    engine = GameEngine(seed=2)
    controller = TimelineController.from_state(engine.snapshot())
    assert controller.at_end()

    message = engine.start_game()
    controller.append(engine.snapshot(), message)
    assert controller.index == 1
    assert controller.message == message
    assert len(controller.current.board) == 1

    controller.back()
    assert controller.index == 0
    assert controller.current.board == []
    controller.back()
    assert controller.index == 0

    controller.jump(10)
    assert controller.at_end()


def test_snapshots_do_not_follow_later_turns():
    engine = GameEngine(seed=2)
    engine.start_game()
    before = engine.snapshot()
    fingerprint = before.stable_hash()
    engine.play("Alice")
    assert before.stable_hash() == fingerprint
    assert engine.state.stable_hash() != fingerprint


def test_resolve_screenshot_path_reads_env(tmp_path, monkeypatch):
    path = tmp_path / "shot.png"
    monkeypatch.setenv("DOMINOES_GUI_SCREENSHOT_PATH", str(path))
    assert resolve_screenshot_path() == path

    monkeypatch.delenv("DOMINOES_GUI_SCREENSHOT_PATH")
    assert resolve_screenshot_path() is None
