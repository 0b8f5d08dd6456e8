"""create-ts-package configuration.

Typed settings for a scaffolding run. Everything has a sensible default so
the CLI can build a ``ScaffoldConfig()`` with no arguments; tests construct
one explicitly to point at a fake registry or a scratch template tree.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from create_ts_package.scaffolder.templates import DEFAULT_TEMPLATE_DIR

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"


class ScaffoldConfig(BaseModel):
    """Settings shared by the pipeline, the registry client and the copier."""

    registry_url: str = Field(
        default=DEFAULT_REGISTRY_URL,
        description="Base URL of the npm-compatible registry used for version lookups",
    )
    registry_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; None waits indefinitely",
    )
    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Static template tree copied into every new project",
    )
    manifest_filename: str = Field(default="package.json")
    build_config_filename: str = Field(default="tsconfig.json")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def manifest_path(self, project_dir: str | Path) -> Path:
        """Where ``package.json`` is written inside *project_dir*."""
        return Path(project_dir) / self.manifest_filename

    def build_config_path(self, project_dir: str | Path) -> Path:
        """Where ``tsconfig.json`` is written inside *project_dir*."""
        return Path(project_dir) / self.build_config_filename
