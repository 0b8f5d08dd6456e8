"""Manifest builder.

Turns ``Answers`` into the ``PackageManifest`` written as ``package.json``.
The only external input is the latest published version of each dev
dependency, looked up once per package through a registry client.
"""

from __future__ import annotations

from typing import Protocol

from .models import Answers, PackageManager, PackageManifest

BUILD_TOOL = "nodemon"
COMPILER = "typescript"

#: Dev dependencies in lookup order.
DEV_DEPENDENCIES: tuple[str, ...] = (BUILD_TOOL, COMPILER)

DEFAULT_AUTHOR = "unknown"


class VersionLookup(Protocol):
    """Anything that can resolve the latest version of a package."""

    async def latest_version(self, package: str) -> str: ...


def build_scripts(package_manager: PackageManager) -> dict[str, str]:
    """Return the ``scripts`` section for *package_manager*."""
    return {
        "build": "tsc",
        "dev": 'nodemon -e ts --exec "npm run build"',
        "prepublish": package_manager.run_script("build"),
    }


class ManifestBuilder:
    """Builds ``package.json`` contents from user answers.

    Each dev dependency costs one registry lookup, awaited in turn.  Lookup
    errors are not handled here: they propagate and no manifest is produced.
    """

    def __init__(self, registry: VersionLookup) -> None:
        self.registry = registry

    async def resolve_dev_dependencies(self) -> dict[str, str]:
        """Map each dev dependency to a caret range on its latest version."""
        resolved: dict[str, str] = {}
        for package in DEV_DEPENDENCIES:
            version = await self.registry.latest_version(package)
            resolved[package] = f"^{version}"
        return resolved

    async def build(self, answers: Answers) -> PackageManifest:
        dev_dependencies = await self.resolve_dev_dependencies()
        return PackageManifest(
            name=answers.name,
            description=answers.description,
            scripts=build_scripts(answers.package_manager),
            repository=answers.repository or None,
            author=answers.author or DEFAULT_AUTHOR,
            dev_dependencies=dev_dependencies,
        )
