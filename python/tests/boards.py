"""Board builders shared by the test modules.

Layouts are written as partial rows of tile codes on top of a fixed
background. ``.`` keeps the background tile, ``#`` leaves the cell empty,
and missing rows or columns are background too. The background alone has
no match and no legal move, so any behaviour a test sees comes from the
codes it writes.
"""

from __future__ import annotations

import json
from pathlib import Path

from beachmatch.models.grid import BOARD_SIZE, Coord, Grid, Move
from beachmatch.models.tile import TileType

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

BACKGROUND = (TileType.CRAB, TileType.PALM, TileType.STAR, TileType.HIBISCUS)


def background(row: int, col: int) -> TileType:
    return BACKGROUND[(row + 2 * col) % len(BACKGROUND)]


def layout(*rows: str) -> list[list[TileType | None]]:
    padded = [row.ljust(BOARD_SIZE, ".") for row in rows]
    padded += ["." * BOARD_SIZE] * (BOARD_SIZE - len(padded))
    out: list[list[TileType | None]] = []
    for r, row in enumerate(padded):
        cells: list[TileType | None] = []
        for c, ch in enumerate(row):
            if ch == ".":
                cells.append(background(r, c))
            elif ch == "#":
                cells.append(None)
            else:
                cells.append(TileType.from_code(ch))
        out.append(cells)
    return out


def board(*rows: str) -> Grid:
    return Grid.from_rows(layout(*rows))


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def fixture_id(data: dict) -> str:
    return data["id"]


def fixture_move(data: dict) -> Move:
    (r1, c1), (r2, c2) = data["move"]
    return Move((r1, c1), (r2, c2))


def rect(top_left: list[int], bottom_right: list[int]) -> set[Coord]:
    (r1, c1), (r2, c2) = top_left, bottom_right
    return {(r, c) for r in range(r1, r2 + 1) for c in range(c1, c2 + 1)}
