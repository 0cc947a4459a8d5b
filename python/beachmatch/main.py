"""Beach Match.

Usage::

    beachmatch                          # interactive play, sand board
    beachmatch --variant sea --seed 7   # reproducible sea board
    beachmatch --turns 20               # let the solver play 20 swaps
    beachmatch -b 3,3 -b 3,4 --umbrella --sand-level 2
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.logging import RichHandler

from beachmatch.engine.gameplay import GamePlay
from beachmatch.errors import BeachMatchError
from beachmatch.models.blocker import Blocker
from beachmatch.models.grid import in_bounds
from beachmatch.models.tile import Variant

logger = logging.getLogger("beachmatch")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )


def _parse_blockers(
    values: list[str], sand_level: int, umbrella: bool, treasure: bool
) -> list[Blocker]:
    blockers: list[Blocker] = []
    for raw in values:
        try:
            row, col = (int(part) for part in raw.split(","))
        except ValueError:
            raise typer.BadParameter(f"expected ROW,COL, got {raw!r}", param_hint="--blocker")
        if not in_bounds((row, col)):
            raise typer.BadParameter(f"{raw} is off the board", param_hint="--blocker")
        blockers.append(
            Blocker(row, col, sand_level=sand_level, has_umbrella=umbrella, has_treasure=treasure)
        )
    return blockers


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    variant: Variant = typer.Option(
        Variant.SAND, "-v", "--variant",
        help="Tile palette used for the board and refills.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible boards and refills.",
    ),
    turns: int = typer.Option(
        0, "-t", "--turns",
        min=0,
        help="Autoplay this many solver-chosen swaps instead of prompting.",
    ),
    blocker: List[str] = typer.Option(
        [], "-b", "--blocker",
        help="Sand pile at ROW,COL (repeatable).",
    ),
    sand_level: int = typer.Option(
        1, "--sand-level",
        min=1,
        help="Charges needed to clear each sand pile.",
    ),
    umbrella: bool = typer.Option(
        False, "--umbrella",
        help="Cover every sand pile with an umbrella.",
    ),
    treasure: bool = typer.Option(
        False, "--treasure",
        help="Hide treasure under every sand pile.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Log every cascade round.",
    ),
) -> None:
    """Beach Match: an 8×8 match-3 board in the terminal."""
    _configure_logging(verbose)
    blockers = _parse_blockers(blocker, sand_level, umbrella, treasure)

    try:
        game = GamePlay(variant, blockers, seed=seed)
    except BeachMatchError as exc:
        logger.error("Could not start a game: %s", exc)
        raise typer.Exit(code=1)

    from beachmatch.frontend import rich_app

    rich_app.run(game, turns=turns)


if __name__ == "__main__":
    app()
