from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Union

from .hand import Hand
from .rules import DEFAULT_MAX_VALUE, DEFAULT_PLAYERS, Ruleset
from .state import GameEvent, GameState
from .tiles import Tile, find_face, flip, format_board, format_tile, generate_tiles
from .turn import OutcomeKind, Side, TurnResult

logger = logging.getLogger(__name__)

TileTarget = Union[List[Tile], Hand]


class UnknownPlayerError(ValueError):
    pass


class GameNotStartedError(ValueError):
    pass


def transfer_tiles(source: List[Tile], target: TileTarget, qty: int = 1) -> Optional[Tile]:
    """Move up to ``qty`` tiles from the end of ``source`` onto ``target``.

    Asking for more tiles than ``source`` holds moves whatever is left; the
    shortfall is not an error. Returns the last tile moved, or None.
    """
    qty = min(qty, len(source))
    last: Optional[Tile] = None
    for _ in range(qty):
        last = source.pop()
        target.append(last)
    return last


class GameEngine:
    """Dominoes game: deals at construction, then resolves one turn per ``play``.

    ``rng`` needs ``shuffle(list)`` and ``randint(a, b)``; it drives the pool
    shuffle and, for every hand tile scanned, whether the left or the right
    end of the board is tried first.
    """

    def __init__(
        self,
        player_names: Sequence[str] = DEFAULT_PLAYERS,
        max_value: int = DEFAULT_MAX_VALUE,
        rng: Any = None,
        seed: Optional[int] = None,
    ) -> None:
        self.ruleset = Ruleset(tuple(player_names), max_value)
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = self._deal()

    @classmethod
    def from_ruleset(cls, ruleset: Ruleset, rng: Any = None, seed: Optional[int] = None) -> "GameEngine":
        return cls(ruleset.player_names, ruleset.max_value, rng=rng, seed=seed)

    def _deal(self) -> GameState:
        ruleset = self.ruleset
        pool = generate_tiles(ruleset.max_value)
        self.rng.shuffle(pool)
        state = GameState(ruleset=ruleset, pool=pool, stock=[], hands={})

        transfer_tiles(state.pool, state.stock, ruleset.stock_size())
        for name in ruleset.player_names:
            state.hands[name] = Hand()
            transfer_tiles(state.pool, state.hands[name], ruleset.hand_size())

        if not ruleset.is_full_deal():
            logger.warning(
                "max_value=%d cannot cover a full deal for %d players (%d of %d tiles needed); dealing what is left",
                ruleset.max_value,
                ruleset.num_players,
                ruleset.deal_size(),
                ruleset.tile_count(),
            )
        logger.debug(
            "dealt stock=%d hands=%s pool=%d",
            len(state.stock),
            {name: len(hand) for name, hand in state.hands.items()},
            len(state.pool),
        )
        return state

    # --- queries ---------------------------------------------------------------

    def winner(self) -> str:
        return self.state.winner

    def tie(self) -> bool:
        return self.state.tie

    def is_over(self) -> bool:
        return self.state.is_over()

    @property
    def player_names(self) -> List[str]:
        return list(self.ruleset.player_names)

    @property
    def board(self) -> List[Tile]:
        return list(self.state.board)

    @property
    def stock(self) -> List[Tile]:
        return list(self.state.stock)

    @property
    def pool(self) -> List[Tile]:
        return list(self.state.pool)

    @property
    def hands(self) -> Dict[str, List[Tile]]:
        return {name: hand.tiles() for name, hand in self.state.hands.items()}

    @property
    def without_stock(self) -> List[str]:
        return [name for name in self.ruleset.player_names if name in self.state.without_stock]

    def hand(self, name: str) -> Hand:
        try:
            return self.state.hands[name]
        except KeyError:
            raise UnknownPlayerError(f"unknown player: {name!r}") from None

    def left_value(self) -> int:
        self._require_board()
        return self.state.board[0][0]

    def right_value(self) -> int:
        self._require_board()
        return self.state.board[-1][1]

    def snapshot(self) -> GameState:
        return self.state.copy()

    def format_tile(self, tile: Tile) -> str:
        return format_tile(tile)

    def format_board(self) -> str:
        return format_board(self.state.board)

    def _require_board(self) -> None:
        if not self.state.board:
            raise GameNotStartedError("the board is empty; call start_game() first")

    def _record(self, player: str, kind: OutcomeKind, message: str, tile: Optional[Tile] = None) -> None:
        self.state.event_log.append(GameEvent(player=player, kind=kind.value, message=message, tile=tile))

    # --- turn resolution ---------------------------------------------------------

    def start_game(self) -> str:
        tile = transfer_tiles(self.state.stock, self.state.board, 1)
        if tile is None:
            logger.warning("stock is empty; the game starts without a first tile")
            return "Game starting with an empty board."
        message = f"Game starting with first tile: {format_tile(tile)}"
        logger.info(message)
        self.state.event_log.append(GameEvent(player="", kind="start", message=message, tile=tile))
        return message

    def check_winner(self, name: str) -> None:
        if self.state.winner == "" and len(self.hand(name)) == 0:
            self.state.winner = f"Player {name} has won!"
            logger.info(self.state.winner)

    def place_tile(self, name: str, key: int, tile: Tile, side: Union[Side, str]) -> TurnResult:
        """Put ``tile`` (already oriented) at one end of the board.

        The tile is taken out of ``name``'s hand by ``key``. An unrecognised
        ``side`` leaves everything untouched and yields an ERROR result.
        """
        try:
            side = Side(side)
        except ValueError:
            logger.error("cannot place %s on side %r", format_tile(tile), side)
            return TurnResult.error()

        hand = self.hand(name)
        self._require_board()
        if key not in hand:
            raise ValueError(f"{name} holds no tile with key {key}")

        hand.remove(key)
        if side is Side.LEFT:
            neighbour = self.state.board[0]
            self.state.board.insert(0, tile)
        else:
            neighbour = self.state.board[-1]
            self.state.board.append(tile)
        self.check_winner(name)

        message = f"{name} plays {format_tile(tile)} to connect to tile {format_tile(neighbour)} on the board."
        logger.debug("%s (%s)", message, side.value)
        self._record(name, OutcomeKind.DOMINO, message, tile)
        return TurnResult(True, OutcomeKind.DOMINO, message)

    def _try_side(self, name: str, key: int, tile: Tile, side: Side, end_value: int) -> Optional[TurnResult]:
        face = find_face(tile, end_value)
        if face is None:
            return None
        # the face touching the board must be b on the left end and a on the right end
        as_is = 1 if side is Side.LEFT else 0
        oriented = tile if face == as_is else flip(tile)
        return self.place_tile(name, key, oriented, side)

    def play(self, name: str) -> TurnResult:
        if self.state.is_over():
            return TurnResult.finished()

        hand = self.hand(name)
        left = self.left_value()
        right = self.right_value()

        for key, tile in hand.items():
            if self.rng.randint(0, 1) == 0:
                order = ((Side.LEFT, left), (Side.RIGHT, right))
            else:
                order = ((Side.RIGHT, right), (Side.LEFT, left))
            for side, end_value in order:
                result = self._try_side(name, key, tile, side, end_value)
                if result is not None and result.matched:
                    return result

        return self.draw_from_stock(name)

    def draw_from_stock(self, name: str) -> TurnResult:
        hand = self.hand(name)
        if not self.state.stock:
            # players are never taken off this list, even after a later draw
            self.state.without_stock.add(name)
            if len(self.state.without_stock) == self.ruleset.num_players:
                self.state.tie = True
                message = "Nobody can play. It is a tie!!"
                logger.info(message)
                self._record(name, OutcomeKind.TIE, message)
                return TurnResult(True, OutcomeKind.TIE, message)
            message = f"Without stock! {name} cannot play."
            logger.debug(message)
            self._record(name, OutcomeKind.WITHOUT_STOCK, message)
            return TurnResult(True, OutcomeKind.WITHOUT_STOCK, message)

        tile = transfer_tiles(self.state.stock, hand, 1)
        message = f"{name} cannot play, drawing tile {format_tile(tile)}."
        logger.debug("%s stock=%d", message, len(self.state.stock))
        self._record(name, OutcomeKind.DRAW, message, tile)
        return TurnResult(False, OutcomeKind.DRAW, message)
