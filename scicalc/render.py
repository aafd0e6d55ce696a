"""Rich rendering for the terminal front end.

Draws the calculator display as a panel and the help tables (function keys,
keyboard bindings, display trace).
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from scicalc.formatter import fit_display, format_number
from scicalc.functions import FUNCTION_LABELS
from scicalc.keymap import KEY_BINDINGS
from scicalc.models import DisplayUpdate

_KEY_DESCRIPTIONS = {
    ".": "decimal point",
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    "%": "remainder",
    "Enter": "equals",
    "=": "equals",
    "Escape": "all clear",
    "Backspace": "clear entry",
    "(": "literal (",
    ")": "literal )",
}


def display_panel(
    update: DisplayUpdate,
    width: int = 12,
    memory: float = 0.0,
    last_answer: float = 0.0,
) -> Panel:
    """Build the display panel for one DisplayUpdate."""
    if not update.powered:
        return Panel(Text(update.text, style="dim"), title="scicalc", border_style="dim")

    style = "bold red" if update.transient else "bold"
    body = Text(fit_display(update.text, width), style=style, justify="right")
    title = "[bold yellow]SHIFT[/bold yellow]" if update.shift_active else "scicalc"
    footer = f"M={format_number(memory)}  Ans={format_number(last_answer)}"
    return Panel(body, title=title, subtitle=footer, border_style="green", width=max(width + 12, 28))


def render_display(
    console: Console,
    update: DisplayUpdate,
    width: int = 12,
    memory: float = 0.0,
    last_answer: float = 0.0,
) -> None:
    console.print(display_panel(update, width=width, memory=memory, last_answer=last_answer))


def render_functions(console: Console) -> None:
    """Table of function keys in normal and shifted mode."""
    table = Table(title="Function keys", show_header=True, header_style="bold")
    table.add_column("Key", style="green", min_width=8)
    table.add_column("Normal", min_width=14)
    table.add_column("Shifted", style="yellow", min_width=14)

    for fn, (normal, shifted) in FUNCTION_LABELS.items():
        # Same meaning in both modes: dim the repeat
        shifted_cell = f"[dim]{shifted}[/dim]" if shifted == normal else shifted
        table.add_row(fn.value, normal, shifted_cell)

    console.print()
    console.print(table)
    console.print()


def render_keys(console: Console) -> None:
    """Table of keyboard bindings."""
    table = Table(title="Keyboard", show_header=True, header_style="bold")
    table.add_column("Key", style="green", min_width=10)
    table.add_column("Action", min_width=16)

    table.add_row("0-9", "digit")
    for key in KEY_BINDINGS:
        if key.isdigit():
            continue
        table.add_row(key, _KEY_DESCRIPTIONS.get(key, key))

    console.print()
    console.print(table)
    console.print()


def render_trace(console: Console, tokens: list[str], updates: list[DisplayUpdate]) -> None:
    """Table pairing each pressed button with the display it produced."""
    table = Table(title="Display trace", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Button", style="green")
    table.add_column("Display", justify="right")
    table.add_column("Shift", justify="center")

    for i, (token, update) in enumerate(zip(tokens, updates), start=1):
        text = f"[red]{update.text}[/red]" if update.transient else update.text
        table.add_row(str(i), token, text, "[yellow]S[/yellow]" if update.shift_active else "")

    console.print()
    console.print(table)
    console.print()
