from __future__ import annotations

"""
Dominoes viewer: the board across the top, one row of tiles per player below.

Controls:
- Space / Enter: the next player takes a turn.
- Left / Right: step back and forth through earlier turns (read only).
- N: deal a new game with a fresh seed.
- Esc: quit.

When DOMINOES_GUI_SCREENSHOT_PATH is set, a screenshot is written there once
the game has a winner or ends in a tie.
"""

import argparse
import os
import pathlib
import traceback
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pygame

from .engine import GameEngine
from .rules import DEFAULT_MAX_VALUE, DEFAULT_PLAYERS, Ruleset
from .state import GameState
from .tiles import Tile

SCREENSHOT_ENV = "DOMINOES_GUI_SCREENSHOT_PATH"


# --- Pure helpers ----------------------------------------------------------------

def next_player(names: Sequence[str], current: Optional[str]) -> str:
    if current is None or current not in names:
        return names[0]
    return names[(list(names).index(current) + 1) % len(names)]


def wrap_board(board: Sequence[Tile], per_row: int) -> List[List[Tile]]:
    """Split the chain into rows of at most ``per_row`` tiles, keeping order."""
    if per_row < 1:
        raise ValueError("per_row must be >= 1")
    return [list(board[i:i + per_row]) for i in range(0, len(board), per_row)]


def resolve_screenshot_path() -> Optional[pathlib.Path]:
    raw = os.environ.get(SCREENSHOT_ENV, "").strip()
    if not raw:
        return None
    return pathlib.Path(raw).expanduser()


@dataclass
class TimelineEntry:
    state: GameState
    message: str


@dataclass
class TimelineController:
    entries: List[TimelineEntry] = field(default_factory=list)
    index: int = 0

    @classmethod
    def from_state(cls, state: GameState, message: str = "") -> "TimelineController":
        return cls([TimelineEntry(state, message)], 0)

    @property
    def current(self) -> GameState:
        return self.entries[self.index].state

    @property
    def message(self) -> str:
        return self.entries[self.index].message

    def at_end(self) -> bool:
        return self.index == len(self.entries) - 1

    def append(self, state: GameState, message: str = "") -> None:
        self.entries.append(TimelineEntry(state, message))
        self.index = len(self.entries) - 1

    def jump(self, index: int) -> None:
        self.index = max(0, min(index, len(self.entries) - 1))

    def back(self) -> None:
        self.jump(self.index - 1)

    def forward(self) -> None:
        self.jump(self.index + 1)


# --- Theme -----------------------------------------------------------------------

BG = (22, 27, 34)
PANEL = (30, 36, 46)
PANEL_LINE = (54, 63, 77)
TEXT = (220, 226, 235)
SUB = (164, 174, 187)
ACCENT = (88, 138, 255)
ERR = (235, 87, 87)
WARN = (255, 170, 40)

TILE_W = 64
TILE_H = 34


# --- Drawing ---------------------------------------------------------------------

def draw_panel(surface, rect: pygame.Rect, title: Optional[str], font):
    pygame.draw.rect(surface, PANEL, rect, border_radius=10)
    pygame.draw.rect(surface, PANEL_LINE, rect, width=2, border_radius=10)
    if title:
        label = font.render(title, True, SUB)
        surface.blit(label, (rect.x + 10, rect.y + 6))


def draw_tile(surface, rect: pygame.Rect, tile: Tile, font, highlight: bool = False):
    border = ACCENT if highlight else (60, 70, 85)
    pygame.draw.rect(surface, (245, 245, 245), rect, border_radius=6)
    pygame.draw.rect(surface, border, rect, width=2, border_radius=6)
    mid = rect.x + rect.width // 2
    pygame.draw.line(surface, (90, 90, 100), (mid, rect.y + 5), (mid, rect.bottom - 5), 2)
    for value, half in ((tile[0], pygame.Rect(rect.x, rect.y, rect.width // 2, rect.height)),
                        (tile[1], pygame.Rect(mid, rect.y, rect.width // 2, rect.height))):
        txt = font.render(str(value), True, (40, 40, 50))
        surface.blit(txt, txt.get_rect(center=half.center))


def status_bar(surface, rect: pygame.Rect, left: str, right: str, small_font, color=SUB):
    pygame.draw.rect(surface, PANEL, rect, border_radius=10)
    pygame.draw.rect(surface, PANEL_LINE, rect, width=2, border_radius=10)
    l = small_font.render(left, True, color)
    r = small_font.render(right, True, color)
    surface.blit(l, (rect.x + 10, rect.y + (rect.height - l.get_height()) // 2))
    surface.blit(r, (rect.right - 10 - r.get_width(), rect.y + (rect.height - r.get_height()) // 2))


# --- GUI entry -------------------------------------------------------------------

def launch_gui(seed: Optional[int] = None, ruleset: Optional[Ruleset] = None) -> None:  # pragma: no cover
    ruleset = ruleset or Ruleset()

    pygame.init()
    pygame.display.set_caption("Dominoes")
    screen = pygame.display.set_mode((1280, 768), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    font = pygame.font.SysFont("arial", 18)
    title_font = pygame.font.SysFont("arial", 24, bold=True)
    small_font = pygame.font.SysFont("arial", 14)
    tile_font = pygame.font.SysFont("arial", 18, bold=True)

    engine = GameEngine.from_ruleset(ruleset, seed=seed)
    timeline = TimelineController.from_state(engine.snapshot())
    timeline.append(engine.snapshot(), engine.start_game())
    last_player: Optional[str] = None
    screenshot_done = False

    def new_game():
        nonlocal engine, timeline, last_player, screenshot_done
        engine = GameEngine.from_ruleset(ruleset)
        timeline = TimelineController.from_state(engine.snapshot())
        timeline.append(engine.snapshot(), engine.start_game())
        last_player = None
        screenshot_done = False

    def step():
        nonlocal last_player
        if not timeline.at_end():
            timeline.jump(len(timeline.entries) - 1)
            return
        if engine.is_over():
            return
        name = next_player(ruleset.player_names, last_player)
        result = engine.play(name)
        last_player = name
        timeline.append(engine.snapshot(), result.message)

    def run_loop():
        nonlocal screen, screenshot_done
        running = True
        while running:
            W, H = screen.get_size()
            screen.fill(BG)
            state = timeline.current

            margin = 10
            header_h = 56
            status_h = 32
            hands_h = max(120, min(60 + 50 * len(ruleset.player_names), H // 2))
            board_h = H - header_h - hands_h - status_h - 4 * margin

            header = pygame.Rect(margin, margin, W - 2 * margin, header_h)
            board_panel = pygame.Rect(margin, header.bottom + margin, W - 2 * margin, board_h)
            hands_panel = pygame.Rect(margin, board_panel.bottom + margin, W - 2 * margin, hands_h)
            status = pygame.Rect(margin, hands_panel.bottom + margin, W - 2 * margin, status_h)

            draw_panel(screen, header, None, font)
            screen.blit(title_font.render("Dominoes", True, TEXT), (header.x + 12, header.y + 12))
            outcome = state.winner or ("Nobody can play. It is a tie!!" if state.tie else "")
            if outcome:
                label = font.render(outcome, True, WARN)
                screen.blit(label, (header.right - label.get_width() - 16, header.y + 16))

            draw_panel(screen, board_panel, f"BOARD ({len(state.board)})   stock: {len(state.stock)}", font)
            per_row = max(1, (board_panel.width - 24) // (TILE_W + 6))
            y = board_panel.y + 32
            for row in wrap_board(state.board, per_row):
                x = board_panel.x + 12
                for tile in row:
                    draw_tile(screen, pygame.Rect(x, y, TILE_W, TILE_H), tile, tile_font)
                    x += TILE_W + 6
                y += TILE_H + 8

            draw_panel(screen, hands_panel, "HANDS", font)
            y = hands_panel.y + 32
            for name in ruleset.player_names:
                hand = state.hands[name]
                marker = " (no stock)" if name in state.without_stock else ""
                screen.blit(font.render(f"{name}{marker}", True, TEXT), (hands_panel.x + 12, y + 8))
                x = hands_panel.x + 160
                for tile in hand.tiles():
                    if x + TILE_W > hands_panel.right - 10:
                        break
                    draw_tile(screen, pygame.Rect(x, y, TILE_W, TILE_H), tile, tile_font, highlight=name == last_player)
                    x += TILE_W + 6
                y += TILE_H + 12

            position = f"turn {timeline.index}/{len(timeline.entries) - 1}"
            status_bar(screen, status, timeline.message, position, small_font)

            if engine.is_over() and not screenshot_done:
                path = resolve_screenshot_path()
                if path is not None:
                    pygame.image.save(screen, str(path))
                screenshot_done = True

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        step()
                    elif event.key == pygame.K_LEFT:
                        timeline.back()
                    elif event.key == pygame.K_RIGHT:
                        timeline.forward()
                    elif event.key == pygame.K_n:
                        new_game()

            pygame.display.flip()
            clock.tick(60)
        pygame.quit()

    try:
        run_loop()
    except Exception:
        # keep the window open with the traceback
        tb = traceback.format_exc()
        lines = tb.splitlines()[-40:]
        W, H = screen.get_size()
        while True:
            screen.fill((15, 18, 23))
            screen.blit(title_font.render("GUI crashed, traceback:", True, ERR), (20, 20))
            y = 60
            for ln in lines:
                s = small_font.render(ln[:180], True, (230, 230, 230))
                screen.blit(s, (20, y))
                y += small_font.get_height() + 2
                if y > H - 40:
                    break
            hint = small_font.render("Press ESC or close the window.", True, WARN)
            screen.blit(hint, (20, H - 28))
            pygame.display.flip()
            for e in pygame.event.get():
                if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                    pygame.quit()
                    return


def main(argv: Optional[List[str]] = None) -> None:  # pragma: no cover
    parser = argparse.ArgumentParser(description="Watch a game of dominoes turn by turn.")
    parser.add_argument("--players", nargs="+", default=list(DEFAULT_PLAYERS), help="Player names, in turn order.")
    parser.add_argument("--max-value", type=int, default=DEFAULT_MAX_VALUE, help="Highest pip value on a tile.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible game.")
    args = parser.parse_args(argv)
    launch_gui(seed=args.seed, ruleset=Ruleset(tuple(args.players), args.max_value))


if __name__ == "__main__":  # allows standalone execution
    main()
