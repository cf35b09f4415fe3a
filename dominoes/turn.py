from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class OutcomeKind(str, Enum):
    NONE = ""
    DOMINO = "domino"
    DRAW = "draw"
    WITHOUT_STOCK = "without-stock"
    TIE = "tie"
    ERROR = "error"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class TurnResult(NamedTuple):
    matched: bool
    kind: OutcomeKind
    message: str

    @staticmethod
    def finished() -> "TurnResult":
        return TurnResult(True, OutcomeKind.NONE, "")

    @staticmethod
    def error() -> "TurnResult":
        return TurnResult(False, OutcomeKind.ERROR, "Oops. =/")
