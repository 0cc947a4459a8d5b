"""Injectable randomness for refills, reshuffles and board generation."""

from __future__ import annotations

import itertools
import random
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from beachmatch.models.tile import Tile, TileType

T = TypeVar("T")


class TileSource:
    """Random tile types plus a monotonically increasing tile id.

    Pass a seeded ``random.Random`` (or use :meth:`seeded`) to make every
    refill and shuffle reproducible.
    """

    def __init__(self, rng: random.Random | None = None, id_prefix: str = "t") -> None:
        self.rng = rng if rng is not None else random.Random()
        self._ids = itertools.count(1)
        self._prefix = id_prefix

    @classmethod
    def seeded(cls, seed: int | None) -> TileSource:
        return cls(random.Random(seed))

    def random_type(self, palette: Sequence[TileType]) -> TileType:
        return self.rng.choice(palette)

    def new_tile(self, row: int, col: int, tile_type: TileType) -> Tile:
        return Tile(f"{self._prefix}{next(self._ids)}", tile_type, row, col)

    def random_tile(self, row: int, col: int, palette: Sequence[TileType]) -> Tile:
        return self.new_tile(row, col, self.random_type(palette))

    def choice(self, seq: Sequence[T]) -> T:
        return self.rng.choice(seq)

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher–Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.rng.randint(0, i)
            items[i], items[j] = items[j], items[i]
