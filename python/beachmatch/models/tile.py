"""Tile types, palettes and the tile record itself."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Variant(StrEnum):
    SAND = "sand"
    SEA = "sea"


class TileType(StrEnum):
    # sand palette
    CRAB = "crab"
    PALM = "palm"
    STAR = "star"
    HIBISCUS = "hibiscus"
    SHELL = "shell"
    # sea palette
    SQUID = "squid"
    SHRIMP = "shrimp"
    BLOWFISH = "blowfish"
    JELLYFISH = "jellyfish"
    TROPICAL_FISH = "tropical_fish"
    # drop-objective tile, leaves the board from the bottom row
    COCONUT = "coconut"
    # revealed from under sand
    DIAMOND = "diamond"
    COIN = "coin"
    AMPHORA = "amphora"
    RING = "ring"

    @property
    def code(self) -> str:
        """One-character code used by text layouts."""
        return _CODES[self]

    @classmethod
    def from_code(cls, code: str) -> TileType:
        try:
            return _BY_CODE[code]
        except KeyError:
            raise ValueError(f"Unknown tile code {code!r}.") from None

    @property
    def is_exiting(self) -> bool:
        return self in EXITING_TYPES

    @property
    def is_treasure(self) -> bool:
        return self in TREASURE_TYPES


_CODES: dict[TileType, str] = {
    TileType.CRAB: "C",
    TileType.PALM: "P",
    TileType.STAR: "T",
    TileType.HIBISCUS: "H",
    TileType.SHELL: "S",
    TileType.SQUID: "Q",
    TileType.SHRIMP: "R",
    TileType.BLOWFISH: "B",
    TileType.JELLYFISH: "J",
    TileType.TROPICAL_FISH: "F",
    TileType.COCONUT: "O",
    TileType.DIAMOND: "D",
    TileType.COIN: "N",
    TileType.AMPHORA: "A",
    TileType.RING: "G",
}
_BY_CODE: dict[str, TileType] = {code: t for t, code in _CODES.items()}

SAND_TYPES: tuple[TileType, ...] = (
    TileType.CRAB,
    TileType.PALM,
    TileType.STAR,
    TileType.HIBISCUS,
    TileType.SHELL,
)
SEA_TYPES: tuple[TileType, ...] = (
    TileType.SQUID,
    TileType.SHRIMP,
    TileType.BLOWFISH,
    TileType.JELLYFISH,
    TileType.TROPICAL_FISH,
)
EXITING_TYPES: frozenset[TileType] = frozenset({TileType.COCONUT})
TREASURE_TYPES: tuple[TileType, ...] = (
    TileType.DIAMOND,
    TileType.COIN,
    TileType.AMPHORA,
    TileType.RING,
)


def palette_for(variant: Variant | str) -> tuple[TileType, ...]:
    """Return the refill palette for a level variant."""
    return SEA_TYPES if Variant(variant) is Variant.SEA else SAND_TYPES


@dataclass(frozen=True)
class Tile:
    """A single tile on the board.

    ``id`` is stable for the tile's whole life so a presentation layer can
    correlate a tile before and after it falls; matching only looks at
    ``type``.
    """

    id: str
    type: TileType
    row: int
    col: int

    @property
    def is_exiting(self) -> bool:
        return self.type.is_exiting

    @property
    def is_treasure(self) -> bool:
        return self.type.is_treasure

    def moved_to(self, row: int, col: int) -> Tile:
        if (row, col) == (self.row, self.col):
            return self
        return replace(self, row=row, col=col)
