"""Shared pytest fixtures for the create-ts-package test suite.

Provides reusable fixtures for:
- Sample answers for both package managers
- A fake registry with canned latest versions
- A small on-disk template tree
- A silent spinner for pipeline runs
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from create_ts_package.scaffolder.models import Answers, PackageManager
from create_ts_package.utils import StepSpinner


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def yarn_answers() -> Answers:
    """Answers with every optional field blank and yarn as installer."""
    return Answers(
        name="foo",
        description="d",
        repository="",
        author="",
        package_manager=PackageManager.YARN,
    )


@pytest.fixture
def npm_answers() -> Answers:
    return Answers(
        name="foo",
        description="d",
        repository="https://github.com/acme/foo",
        author="Ada",
        package_manager=PackageManager.NPM,
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

LATEST_VERSIONS: dict[str, str] = {
    "nodemon": "3.2.1",
    "typescript": "5.0.0",
}


@pytest.fixture
def fake_registry() -> MagicMock:
    """Registry stand-in resolving nodemon to 3.2.1 and typescript to 5.0.0."""

    async def _latest(package: str) -> str:
        return LATEST_VERSIONS[package]

    registry = MagicMock()
    registry.latest_version = AsyncMock(side_effect=_latest)
    return registry


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A miniature template: one nested source file, a dotfile, a binary blob."""
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "src" / "index.ts").write_text("export const x = 1;\n", encoding="utf-8")
    (root / ".gitignore").write_text("node_modules/\n", encoding="utf-8")
    (root / "logo.bin").write_bytes(bytes(range(256)))
    return root


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def spinner_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def quiet_spinner(spinner_output: io.StringIO) -> StepSpinner:
    """A StepSpinner writing plain text into ``spinner_output``."""
    return StepSpinner(Console(file=spinner_output, force_terminal=False, width=400))
