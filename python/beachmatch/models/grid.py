"""The 8×8 board all engine components operate on."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from beachmatch.errors import InvalidLayoutError
from beachmatch.models.tile import Tile, TileType

BOARD_SIZE = 8

Coord = tuple[int, int]
Match = tuple[Coord, ...]


def in_bounds(coord: Coord) -> bool:
    r, c = coord
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def are_adjacent(a: Coord, b: Coord) -> bool:
    """True if *a* and *b* are 4-directional neighbours."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def orthogonal_neighbors(coord: Coord) -> list[Coord]:
    r, c = coord
    candidates = ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1))
    return [n for n in candidates if in_bounds(n)]


@dataclass(frozen=True)
class Move:
    """A requested swap of two cells; ``dest`` anchors special triggers."""

    origin: Coord
    dest: Coord

    @property
    def is_adjacent(self) -> bool:
        return are_adjacent(self.origin, self.dest)

    @property
    def in_bounds(self) -> bool:
        return in_bounds(self.origin) and in_bounds(self.dest)

    def reversed(self) -> Move:
        return Move(self.dest, self.origin)


@dataclass
class Grid:
    """Fixed-size board of tiles.

    ``None`` marks an empty cell: either a blocker cell or a cell vacated
    mid-resolution. At rest only blocker cells are empty.
    """

    cells: list[list[Tile | None]]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in self.cells
        ):
            raise InvalidLayoutError(
                f"Grid must be {BOARD_SIZE}×{BOARD_SIZE}, got "
                f"{len(self.cells)} rows of widths "
                f"{sorted({len(row) for row in self.cells})}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls) -> Grid:
        return cls(cells=[[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[TileType | None]]) -> Grid:
        """Build a grid from a row-major layout of tile types.

        Tiles get ids of the form ``"r-c"`` from their starting cell.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise InvalidLayoutError(f"Layout must be {BOARD_SIZE}×{BOARD_SIZE}.")
        grid = cls.empty()
        for r, row in enumerate(rows):
            for c, tile_type in enumerate(row):
                if tile_type is not None:
                    grid.cells[r][c] = Tile(f"{r}-{c}", TileType(tile_type), r, c)
        return grid

    @classmethod
    def from_codes(cls, rows: Sequence[str], empty: str = "#") -> Grid:
        """Build a grid from one string per row of one-character tile codes.

        Example::

            Grid.from_codes(["CPTHSCPT", ...])
        """
        return cls.from_rows(
            [[None if ch == empty else TileType.from_code(ch) for ch in row] for row in rows]
        )

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return BOARD_SIZE

    def at(self, coord: Coord) -> Tile | None:
        return self.cells[coord[0]][coord[1]]

    def type_at(self, coord: Coord) -> TileType | None:
        tile = self.at(coord)
        return tile.type if tile is not None else None

    def coords(self) -> Iterator[Coord]:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                yield (r, c)

    def tiles(self) -> Iterator[Tile]:
        for row in self.cells:
            for tile in row:
                if tile is not None:
                    yield tile

    def empty_cells(self) -> list[Coord]:
        return [coord for coord in self.coords() if self.at(coord) is None]

    def type_rows(self) -> list[list[TileType | None]]:
        return [[t.type if t is not None else None for t in row] for row in self.cells]

    # -- mutation -------------------------------------------------------------

    def place(self, coord: Coord, tile: Tile | None) -> None:
        """Put *tile* at *coord*, re-stamping its coordinate."""
        r, c = coord
        self.cells[r][c] = tile.moved_to(r, c) if tile is not None else None

    def remove(self, coord: Coord) -> Tile | None:
        tile = self.at(coord)
        self.cells[coord[0]][coord[1]] = None
        return tile

    def swap(self, a: Coord, b: Coord) -> None:
        ta, tb = self.at(a), self.at(b)
        self.place(a, tb)
        self.place(b, ta)

    def copy(self) -> Grid:
        return Grid(cells=[row[:] for row in self.cells])

    # -- display --------------------------------------------------------------

    def pretty(self, empty: str = "#") -> str:
        """Render the grid as rows of tile codes."""
        return "\n".join(
            "".join(t.type.code if t is not None else empty for t in row)
            for row in self.cells
        )
