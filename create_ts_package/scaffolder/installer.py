"""Dependency installation via the chosen package manager.

Runs ``yarn install`` or ``npm install`` inside the generated project.  The
target directory is handed to the child process as its working directory;
the scaffolder's own working directory never changes.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from create_ts_package.errors import ScaffoldError
from create_ts_package.utils import run_command

from .models import PackageManager


class InstallerError(ScaffoldError):
    """Raised when the package manager is missing or exits non-zero."""

    def __init__(self, manager: str, returncode: int | None, message: str) -> None:
        self.manager = manager
        self.returncode = returncode
        super().__init__(message)


async def install_dependencies(
    package_manager: PackageManager,
    cwd: str | Path,
) -> None:
    """Install the project's dependencies with *package_manager*.

    Output goes straight to the terminal and there is no timeout.

    Raises:
        InstallerError: If the executable is not on ``PATH`` or the install
            exits with a non-zero status.
    """
    command = package_manager.install_command()
    executable = shutil.which(command[0])
    if executable is None:
        raise InstallerError(
            package_manager.value, None, f"'{command[0]}' was not found on PATH"
        )

    try:
        returncode, _, _ = await run_command(
            [executable, *command[1:]], cwd=cwd, timeout=None, capture=False
        )
    except FileNotFoundError as exc:
        raise InstallerError(package_manager.value, None, f"Could not run '{command[0]}': {exc}") from exc

    if returncode != 0:
        raise InstallerError(
            package_manager.value,
            returncode,
            f"'{' '.join(command)}' exited with status {returncode}",
        )
