"""Pydantic v2 models for the scaffolder.

``Answers`` is what the user typed, ``PackageManifest`` is what ends up in
``package.json``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PackageManager(str, Enum):
    """Supported installers. ``yarn`` is the default choice."""
    YARN = "yarn"
    NPM = "npm"

    def run_script(self, script: str) -> str:
        """Command line that runs a package.json script with this manager.

        yarn runs scripts directly (``yarn build``); npm needs the ``run``
        sub-command (``npm run build``).
        """
        if self is PackageManager.NPM:
            return f"{self.value} run {script}"
        return f"{self.value} {script}"

    def install_command(self) -> list[str]:
        return [self.value, "install"]


# ---------------------------------------------------------------------------
# User input
# ---------------------------------------------------------------------------

class Answers(BaseModel):
    """Answers collected from the interactive prompts. Immutable."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Package name, used verbatim")
    description: str = Field(default="")
    repository: str = Field(default="", description="Git repository URL, unvalidated")
    author: str = Field(default="", description="Empty means 'unknown' in the manifest")
    package_manager: PackageManager = Field(default=PackageManager.YARN)


# ---------------------------------------------------------------------------
# Generated manifest
# ---------------------------------------------------------------------------

class PackageManifest(BaseModel):
    """Contents of the generated ``package.json``.

    Field order is the key order of the written file.  ``repository`` is
    omitted from the output when unset.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = Field(default="0.0.0")
    description: str = Field(default="")
    main: str = Field(default="dist/index.js")
    scripts: dict[str, str] = Field(default_factory=dict)
    repository: str | None = Field(default=None)
    author: str = Field(default="unknown")
    license: str = Field(default="MIT")
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def to_json(self) -> str:
        """Serialise as 2-space indented JSON with a trailing newline."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True) + "\n"
