"""Typer CLI application with the demo and key-echo commands."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console

from termgrid.core.errors import TermgridError


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termgrid",
        help="Cell-grid terminal UI toolkit.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def demo(
        fps: Annotated[Optional[int], typer.Option("--fps", "-f", help="Target frames per second")] = None,
        counters: Annotated[int, typer.Option("--counters", "-n", help="Number of focusable counters")] = 3,
    ) -> None:
        """Run a small interactive demo (Esc or Ctrl+C quits)."""
        from termgrid.app.application import Application
        from termgrid.cli.demo import DemoScreen
        from termgrid.config import TermgridConfig

        config = TermgridConfig.from_env()
        if fps is not None:
            config.target_fps = max(1, fps)

        screen = DemoScreen(counters=max(1, counters))
        application = Application(config=config)
        application.initial_focus = screen.counters[0]
        try:
            application.run(screen)
        except TermgridError as exc:
            console.print(f"[red]Error:[/] {exc}")
            raise typer.Exit(1)

        console.print(f"[dim]{application.frames_rendered} frames rendered[/]")

    @app.command()
    def keys() -> None:
        """Echo decoded key events until [bold]q[/] is pressed."""
        from termgrid.term.input import InputReader
        from termgrid.term.terminal import Terminal

        out = Console(highlight=False)
        out.print("Press keys to see how they decode; [bold]q[/] quits.")
        reader = InputReader()
        with Terminal.raw_mode():
            while True:
                event = reader.read(timeout=0.1)
                if event is None:
                    if reader.closed:
                        break
                    continue
                name = event.key.name if event.key else repr(event.char)
                mods = (event.modifiers.name or str(event.modifiers)) if event.modifiers else "-"
                out.print(f"{name:<12} mods={mods:<10} raw={event.raw!r}", end="\r\n", markup=False)
                if event.char == "q" and not event.modifiers:
                    break

    @app.command()
    def version() -> None:
        """Show the installed termgrid version."""
        from termgrid import __version__

        Console().print(f"termgrid {__version__}")

    return app
