from typing import Iterable, List, Optional, Sequence, Tuple


class ScriptedRandom:
    """Random source with a fixed pool order and scripted side choices."""

    def __init__(self, pool_order: Optional[Sequence[Tuple[int, int]]] = None, sides: Iterable[int] = (0,)) -> None:
        self.pool_order = None if pool_order is None else list(pool_order)
        self.sides: List[int] = list(sides)
        self.calls = 0

    def shuffle(self, items: list) -> None:
        if self.pool_order is not None:
            items[:] = self.pool_order

    def randint(self, a: int, b: int) -> int:
        value = self.sides[min(self.calls, len(self.sides) - 1)]
        self.calls += 1
        return value
