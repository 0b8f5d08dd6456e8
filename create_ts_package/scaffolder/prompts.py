"""Interactive prompts built on ``rich.prompt``."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_ts_package.utils import console as default_console

from .models import Answers, PackageManager

PREFIX = "[bold cyan]❯[/bold cyan]"


def collect_answers(output: Console | None = None) -> Answers:
    """Ask the questions needed to generate ``package.json``.

    The package name is asked again while it is blank and is then kept
    exactly as typed; everything else may be left blank.
    """
    con = output or default_console

    name = ""
    while not name.strip():
        name = Prompt.ask(f"{PREFIX} Package name", console=con)

    description = Prompt.ask(f"{PREFIX} Description", default="", show_default=False, console=con)
    repository = Prompt.ask(
        f"{PREFIX} Git Repo [dim]optional[/dim]", default="", show_default=False, console=con
    )
    author = Prompt.ask(
        f"{PREFIX} Author [dim]Default: unknown[/dim]", default="", show_default=False, console=con
    )
    package_manager = Prompt.ask(
        f"{PREFIX} Choose your preferred package manager",
        choices=[pm.value for pm in PackageManager],
        default=PackageManager.YARN.value,
        console=con,
    )

    return Answers(
        name=name,
        description=description.strip(),
        repository=repository.strip(),
        author=author.strip(),
        package_manager=PackageManager(package_manager),
    )


def confirm_overwrite(message: str, output: Console | None = None) -> bool:
    """Ask a destructive yes/no question. Defaults to no."""
    return Confirm.ask(message, default=False, console=output or default_console)
