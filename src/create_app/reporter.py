"""Console status output for the scaffolding steps."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from rich.console import Console
from rich.markup import escape

from .errors import ScaffoldError

SUCCESS_MARK = "[green]✔[/green]"
FAILURE_MARK = "[red]✖[/red]"


class ProgressReporter:
    """Print start, success and failure lines around long running steps."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    @contextmanager
    def step(self, text: str, success: str, *, spinner: bool = True) -> Iterator[None]:
        """Run the body of the ``with`` block as one reported step.

        A spinner is shown while the block runs. Pass ``spinner=False`` when
        the block streams output of its own to the terminal. A
        :class:`~create_app.errors.ScaffoldError` raised inside the block is
        reported and re-raised.
        """

        try:
            if spinner:
                with self.console.status(escape(text)):
                    yield
            else:
                self.console.print(f"[cyan]›[/cyan] {escape(text)}")
                yield
        except ScaffoldError as exc:
            self.fail(exc.message)
            exc.reported = True
            raise
        self.succeed(success)

    def succeed(self, text: str) -> None:
        self.console.print(f"{SUCCESS_MARK} {escape(text)}")

    def fail(self, text: str) -> None:
        self.err_console.print(f"{FAILURE_MARK} [red]{escape(text)}[/red]")

    def report_error(self, error: ScaffoldError) -> None:
        """Print ``error`` with its detail lines and hint on stderr."""

        self.err_console.print(f"[red]{escape(error.message)}[/red]")
        if error.details:
            self.err_console.print()
            for line in error.details:
                self.err_console.print(f"[red]{escape(line)}[/red]")
        if error.hint:
            self.err_console.print()
            self.err_console.print(f"[red]{escape(error.hint)}[/red]")

    def usage(self, prog: str) -> None:
        """Explain how to call the tool when the project directory is missing."""

        self.err_console.print("[red]Please specify the project directory[/red]")
        self.err_console.print(f"  [cyan]{escape(prog)}[/cyan] [green]<project-directory>[/green]")
        self.err_console.print()
        self.err_console.print("For example:")
        self.err_console.print(f"  [cyan]{escape(prog)}[/cyan] [green]my-app[/green]")
        self.err_console.print()
        self.err_console.print(f"Run [cyan]{escape(prog)} --help[/cyan] to see all options")

    def success(self, name: str, path: Path, manager: str) -> None:
        self.console.print(
            f"{SUCCESS_MARK} [green]Success![/green] Created {escape(name)} at {escape(str(path))}"
        )
        self.console.print()
        self.console.print("You can begin by running:")
        self.console.print(f"    [cyan]cd {escape(name)} && {escape(manager)} start[/cyan]")
        self.console.print()


__all__ = ["ProgressReporter"]
