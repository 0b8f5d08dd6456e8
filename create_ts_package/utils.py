"""Shared utility functions for create-ts-package.

Provides async command execution, async file writes and the Rich-based
console helpers (step spinner, coloured messages, summary table) used by
the pipeline.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.status import Status
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.  The parent's working
            directory is never changed.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the process runs.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


async def write_text_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8 without blocking the event loop.

    The parent directory must already exist; it is prepared separately so
    that a missing directory surfaces as an error instead of being created
    behind the user's back.
    """
    file_path = Path(path)
    await asyncio.to_thread(_write_file, file_path, content)
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


class StepSpinner:
    """A single-line progress indicator for sequential pipeline steps.

    Wraps :class:`rich.status.Status`.  Only one step is live at a time:
    ``start`` shows the spinner, ``succeed``/``fail`` replace it with a
    permanent tick or cross line.  ``paused`` hides the spinner while an
    interactive prompt owns the terminal.
    """

    def __init__(self, output: Console | None = None) -> None:
        self.console = output or console
        self.text = ""
        self._status: Status | None = None

    @property
    def is_spinning(self) -> bool:
        return self._status is not None

    def start(self, text: str | None = None) -> None:
        """Show the spinner, optionally with new step text."""
        if text is not None:
            self.text = text
        if self._status is None:
            self._status = self.console.status(escape(self.text), spinner="dots")
            self._status.start()
        else:
            self._status.update(escape(self.text))

    def stop(self) -> None:
        """Hide the spinner without printing anything."""
        if self._status is not None:
            self._status.stop()
            self._status = None

    def succeed(self, text: str | None = None) -> None:
        self.stop()
        self.console.print(f"[bold green]✔[/bold green] {escape(text or self.text)}")

    def fail(self, text: str | None = None) -> None:
        self.stop()
        self.console.print(f"[bold red]✖[/bold red] {escape(text or self.text)}")

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Temporarily hide the spinner, restoring it afterwards if it was live."""
        was_spinning = self.is_spinning
        self.stop()
        try:
            yield
        finally:
            if was_spinning:
                self.start()

    @contextmanager
    def step(self, text: str) -> Iterator["StepSpinner"]:
        """Run a block as one step: spin, then succeed or fail with the error.

        Exceptions are reported and re-raised unchanged.
        """
        self.start(text)
        try:
            yield self
        except Exception as exc:
            self.fail(str(exc) or text)
            raise
        finally:
            self.stop()
        self.succeed(text)
