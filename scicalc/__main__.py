"""CLI for the scicalc scientific calculator.

Usage:
    python -m scicalc press 2 + 3 "*" 4 =          # Feed buttons, print display
    python -m scicalc press --trace 30 sin          # Show every display update
    python -m scicalc repl                          # Interactive keypad
    python -m scicalc functions                     # Function key table
    python -m scicalc keys                          # Keyboard bindings
"""

from __future__ import annotations

import time
from typing import List, Optional

import typer
from rich.console import Console

from scicalc.config import Settings
from scicalc.engine import CalculatorEngine
from scicalc.keymap import press, tokenize
from scicalc.logging_config import setup_logging
from scicalc.models import DisplayUpdate
from scicalc.render import render_display, render_functions, render_keys, render_trace

app = typer.Typer(
    name="scicalc",
    help="Scientific calculator with memory and shift mode",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT_WORDS = ("quit", "exit")


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _drain(engine: CalculatorEngine) -> None:
    """Wait out every pending revert so the display settles."""
    wait = engine.scheduler.next_due_in()
    while wait is not None:
        time.sleep(wait)
        engine.run_pending()
        wait = engine.scheduler.next_due_in()


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING, ..."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Scientific calculator with memory and shift mode."""
    try:
        settings = Settings.from_env()
        if log_level:
            settings.log_level = log_level
            settings.validate()
    except ValueError as e:
        console.print(f"[red]Invalid settings:[/red] {e}")
        raise typer.Exit(2)
    setup_logging(settings.level, log_file)
    ctx.obj = settings


@app.command("press")
def cmd_press(
    ctx: typer.Context,
    buttons: List[str] = typer.Argument(help="Buttons to press, e.g. 2 + 3 = or 30 sin"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Print a table of every display update"),
    settle: bool = typer.Option(False, "--settle", help="Wait for error messages to revert"),
    power_on: bool = typer.Option(True, "--power-on/--no-power-on", help="Start switched on"),
) -> None:
    """Press a sequence of buttons and print the final display."""
    engine = CalculatorEngine(settings=_settings(ctx))
    if power_on:
        engine.power_on()

    tokens = tokenize(" ".join(buttons))
    updates: list[DisplayUpdate] = []
    for token in tokens:
        engine.run_pending()
        try:
            press(engine, token)
        except ValueError:
            console.print(f"[red]Unknown button:[/red] {token}")
            raise typer.Exit(1)
        updates.append(engine.snapshot())

    if settle:
        _drain(engine)
    if trace:
        render_trace(console, tokens, updates)
    typer.echo(engine.display_text)


@app.command("repl")
def cmd_repl(ctx: typer.Context) -> None:
    """Interactive keypad. Type buttons separated by spaces; 'quit' leaves."""
    settings = _settings(ctx)
    engine = CalculatorEngine(settings=settings)
    engine.power_on()

    def show() -> None:
        render_display(
            console, engine.snapshot(), width=settings.display_width,
            memory=engine.memory, last_answer=engine.last_answer,
        )

    console.print("[dim]Buttons: digits, + - * / % = . ( ) sin cos tan log ln sqrt x-1 x3 xy "
                  "x10 (-) ans sto rcl shift ac ce on off. 'quit' to leave.[/dim]")
    show()
    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in _QUIT_WORDS:
            break

        engine.run_pending()
        for token in tokenize(line):
            try:
                press(engine, token)
            except ValueError:
                console.print(f"[yellow]Unknown button: {token}[/yellow]")
                break
        show()


@app.command("functions")
def cmd_functions() -> None:
    """Show the function keys and their shifted meanings."""
    render_functions(console)


@app.command("keys")
def cmd_keys() -> None:
    """Show the keyboard bindings."""
    render_keys(console)


if __name__ == "__main__":
    app()
