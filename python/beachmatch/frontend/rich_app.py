"""Rich terminal frontend: board table, turn summary and stats panels.

Two modes share the same rendering: interactive play (swaps typed at a
prompt) and autoplay (the solver picks every swap).
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from beachmatch.engine.gameplay import GamePlay
from beachmatch.engine.gamesolver import Solver
from beachmatch.models.blocker import Blocker, BlockerChange
from beachmatch.models.grid import BOARD_SIZE, Coord, Move
from beachmatch.models.tile import TileType
from beachmatch.models.turn import TurnResult

console = Console()

_EMOJI: dict[TileType, str] = {
    TileType.CRAB: "\U0001f980",
    TileType.PALM: "\U0001f334",
    TileType.STAR: "⭐",
    TileType.HIBISCUS: "\U0001f33a",
    TileType.SHELL: "\U0001f41a",
    TileType.SQUID: "\U0001f991",
    TileType.SHRIMP: "\U0001f990",
    TileType.BLOWFISH: "\U0001f421",
    TileType.JELLYFISH: "\U0001fabc",
    TileType.TROPICAL_FISH: "\U0001f420",
    TileType.COCONUT: "\U0001f965",
    TileType.DIAMOND: "\U0001f48e",
    TileType.COIN: "\U0001fa99",
    TileType.AMPHORA: "\U0001f3fa",
    TileType.RING: "\U0001f48d",
}


# -- board rendering ----------------------------------------------------------


def _blocker_cell(blocker: Blocker) -> str:
    if blocker.has_umbrella:
        return "[bold magenta]⛱[/bold magenta]"
    return f"[bold yellow on #5c4a1f]{blocker.remaining}[/bold yellow on #5c4a1f]"


def _render_board(game: GamePlay, highlight: Move | None = None) -> Table:
    """Return a Rich Table of the grid, with row/column labels."""
    table = Table(
        show_header=True,
        header_style="dim",
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for c in range(BOARD_SIZE):
        table.add_column(str(c), width=2, justify="center")

    blockers = {b.coord: b for b in game.blockers}
    marked: set[Coord] = {highlight.origin, highlight.dest} if highlight else set()
    for r in range(BOARD_SIZE):
        cells: list[str] = [str(r)]
        for c in range(BOARD_SIZE):
            coord = (r, c)
            tile = game.grid.at(coord)
            if coord in blockers:
                cells.append(_blocker_cell(blockers[coord]))
            elif tile is None:
                cells.append("[dim]·[/dim]")
            elif coord in marked:
                cells.append(f"[reverse]{_EMOJI[tile.type]}[/reverse]")
            else:
                cells.append(_EMOJI[tile.type])
        table.add_row(*cells)
    return table


def _render_stats(game: GamePlay) -> Text:
    state = game.state
    stats = Text()
    for label, value in (
        ("Moves", state.moves),
        ("Score", state.score),
        ("Shells", state.collected_tiles),
        ("Treasure", state.treasure_collected),
        ("Sand", state.blockers_left),
        ("Coconuts out", state.exited),
    ):
        stats.append(f"  {label}: ", style="dim")
        stats.append(str(value), style="bold yellow")
    return stats


def _describe(result: TurnResult) -> str:
    """One-line markup summary of a resolved turn."""
    parts: list[str] = []
    if result.was_bomb_triggered:
        parts.append("[bold red]BOMB![/bold red]")
    elif result.was_rocket_triggered:
        axis = "column" if result.trigger and result.trigger.is_horizontal else "row"
        parts.append(f"[bold red]ROCKET ({axis})![/bold red]")
    parts.append(f"[green]+{result.score}[/green] from {result.total_matches} matches")
    if result.rounds > 1:
        parts.append(f"[cyan]{result.rounds - 1}x cascade[/cyan]")
    cleared = sum(d.kind is BlockerChange.CLEARED for d in result.blocker_deltas)
    if cleared:
        parts.append(f"[yellow]{cleared} sand cleared[/yellow]")
    if result.exits:
        parts.append(f"[magenta]{result.exited_count} coconut(s) out[/magenta]")
    if result.truncated:
        parts.append("[red]cascade cut short[/red]")
    if result.reshuffled:
        parts.append("[yellow]board reshuffled[/yellow]")
    return "  ".join(parts)


def _draw(game: GamePlay, title: str, status: str = "", highlight: Move | None = None) -> None:
    console.clear()
    panel = Panel(
        Group(Align.center(_render_board(game, highlight)), Text(""), Align.center(_render_stats(game))),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))


# -- input --------------------------------------------------------------------


def parse_swap(raw: str) -> Move | None:
    """Parse ``"r c r c"`` (commas allowed) into a move, or ``None``."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 4 or not all(p.isdigit() for p in parts):
        return None
    r1, c1, r2, c2 = (int(p) for p in parts)
    return Move((r1, c1), (r2, c2))


# -- game loops ---------------------------------------------------------------


def play(game: GamePlay) -> None:
    """Interactive mode: type a swap, ``h`` for a hint or ``q`` to quit."""
    status = "Enter a swap as [bold]row col row col[/bold]."
    hint: Move | None = None
    while True:
        _draw(game, "Beach Match", status, hint)
        hint = None
        raw = console.input("[bold cyan]swap> [/bold cyan]").strip().lower()

        if raw in ("q", "quit"):
            return
        if raw in ("h", "hint"):
            hint = Solver.hint(game.grid)
            status = (
                f"[cyan]Hint:[/cyan] {hint.origin} → {hint.dest}"
                if hint
                else "[yellow]No move available.[/yellow]"
            )
            continue

        move = parse_swap(raw)
        if move is None:
            status = "[red]Could not read that swap.[/red]"
            continue
        result = game.swap(move.origin, move.dest)
        status = _describe(result) if result else "[yellow]That swap makes no match.[/yellow]"


def autoplay(game: GamePlay, turns: int, delay: float = 0.2) -> None:
    """Let the solver play *turns* swaps, redrawing after each one."""
    for turn in range(1, turns + 1):
        move = Solver.hint(game.grid)
        if move is None:
            _draw(game, "Autoplay", "[red]No move available.[/red]")
            return
        result = game.swap(move.origin, move.dest)
        status = f"turn {turn}/{turns}  " + (_describe(result) if result else "")
        _draw(game, "Autoplay", status, move)
        time.sleep(delay)

    console.print(Align.center(Text("\n  Autoplay finished.\n", style="bold green")))


# -- public entry point -------------------------------------------------------


def run(game: GamePlay, turns: int = 0) -> None:
    """Launch the Rich frontend; a positive *turns* selects autoplay."""
    if turns > 0:
        autoplay(game, turns)
    else:
        play(game)
