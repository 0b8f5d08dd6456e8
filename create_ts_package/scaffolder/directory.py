"""Target directory preparation.

Before anything is written the target path must be an empty directory.
``prepare_directory`` gets it there, asking the user before it destroys
anything:

* missing path           -> created, no prompt
* empty directory        -> used as is, no prompt
* regular file           -> confirm, then replaced by a directory
* non-empty directory    -> confirm, then emptied

Declining a confirmation raises ``OverwriteDeclinedError`` and leaves the
path untouched.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from create_ts_package.errors import ScaffoldError

from .prompts import confirm_overwrite

FILE_CONFLICT_PROMPT = "A file exists at this path. Overwrite?"
DIRECTORY_CONFLICT_PROMPT = "The directory at this path is not empty. Overwrite?"


class DirectoryStatus(str, Enum):
    """How the target directory was made ready."""
    CREATED = "created"
    EMPTY = "empty"
    REPLACED = "replaced"


class OverwriteDeclinedError(ScaffoldError):
    """Raised when the user refuses to overwrite an existing path."""

    def __init__(self, path: Path, is_file: bool) -> None:
        self.path = path
        self.is_file = is_file
        if is_file:
            message = f"Not overwriting file at path {path}"
        else:
            message = f"Not overwriting files in directory {path}"
        super().__init__(message)


def _is_empty_dir(path: Path) -> bool:
    return next(path.iterdir(), None) is None


def _contains_cwd(path: Path) -> bool:
    cwd = Path.cwd().resolve()
    resolved = path.resolve()
    return cwd == resolved or resolved in cwd.parents


def _remove_directory(path: Path) -> None:
    """Recursively remove *path*, leaving an empty directory in its place.

    The current working directory cannot be removed portably, so when it
    is *path* or lies inside it only the contents of *path* are deleted.
    """
    if path.is_symlink():
        path.unlink()
    elif _contains_cwd(path):
        for child in path.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
        return
    else:
        shutil.rmtree(path)
    path.mkdir()


def prepare_directory(
    path: str | Path = ".",
    confirm: Callable[[str], bool] | None = None,
) -> DirectoryStatus:
    """Make sure *path* exists as an empty directory.

    Args:
        path: Target directory, relative or absolute. Defaults to the
            current directory.
        confirm: Called with a yes/no question before anything is deleted.
            Defaults to an interactive prompt.

    Returns:
        The ``DirectoryStatus`` describing what was done.

    Raises:
        OverwriteDeclinedError: If *confirm* returns ``False``.
        OSError: If creating or deleting fails.
    """
    ask = confirm or confirm_overwrite
    target = Path(os.path.abspath(path))

    if not target.exists() and not target.is_symlink():
        target.mkdir(parents=True)
        return DirectoryStatus.CREATED

    if not target.is_dir():
        if not ask(FILE_CONFLICT_PROMPT):
            raise OverwriteDeclinedError(target, is_file=True)
        target.unlink()
        target.mkdir()
        return DirectoryStatus.REPLACED

    if _is_empty_dir(target):
        return DirectoryStatus.EMPTY

    if not ask(DIRECTORY_CONFLICT_PROMPT):
        raise OverwriteDeclinedError(target, is_file=False)
    _remove_directory(target)
    return DirectoryStatus.REPLACED
