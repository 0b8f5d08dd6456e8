"""Static template copying.

The starter project under ``create_ts_package/scaffolder/template/`` is
copied byte for byte into the target directory.  No rendering happens:
the generated ``package.json`` and ``tsconfig.json`` are written separately.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "template"


def list_template_files(source: str | Path | None = None) -> list[Path]:
    """Return every file in the template tree, relative to its root, sorted."""
    root = Path(source) if source is not None else DEFAULT_TEMPLATE_DIR
    return sorted(p.relative_to(root) for p in root.rglob("*") if p.is_file())


def _copy_tree(source: Path, destination: Path) -> None:
    shutil.copytree(source, destination, dirs_exist_ok=True)


async def copy_template(
    destination: str | Path,
    source: str | Path | None = None,
) -> list[Path]:
    """Copy the template tree into *destination*, preserving its structure.

    Existing files in *destination* with the same relative path are
    overwritten; anything else already there is left alone.  The copy runs
    in a worker thread.

    Args:
        destination: Directory to copy into. Created if missing.
        source: Template root. Defaults to the bundled template.

    Returns:
        Absolute paths of the copied files.

    Raises:
        FileNotFoundError: If *source* does not exist.
    """
    src = Path(source) if source is not None else DEFAULT_TEMPLATE_DIR
    if not src.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src}")

    dest = Path(destination)
    await asyncio.to_thread(_copy_tree, src, dest)
    return [dest / rel for rel in list_template_files(src)]
