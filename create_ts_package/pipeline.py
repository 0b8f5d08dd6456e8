"""create-ts-package pipeline orchestrator.

One run, in order:

1. Ask the user for name, description, repository, author and package manager.
2. Build ``package.json`` (latest nodemon/typescript from the npm registry).
3. Prepare the target directory, confirming before anything is overwritten.
4. Write ``package.json`` and ``tsconfig.json``.
5. Copy the starter template.
6. Install dependencies with the chosen package manager.

Every step is fail-fast: nothing is retried and the first error ends the run.

Usage::

    create-ts-package my-lib
    python -m create_ts_package            # scaffold into the current directory
"""

from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Callable
from pathlib import Path

from create_ts_package.config import ScaffoldConfig
from create_ts_package.registry_client import RegistryClient
from create_ts_package.scaffolder import (
    Answers,
    DirectoryStatus,
    ManifestBuilder,
    OverwriteDeclinedError,
    PackageManifest,
    TSCONFIG_JSON,
    collect_answers,
    confirm_overwrite,
    copy_template,
    install_dependencies,
    prepare_directory,
)
from create_ts_package.scaffolder.manifest import VersionLookup
from create_ts_package.utils import (
    StepSpinner,
    console,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Runs a complete scaffolding session.

    The interactive pieces (answer collection, overwrite confirmation) and
    the registry are injectable so the whole flow can run unattended.

    Attributes:
        config: Run configuration.
        registry: Resolves latest package versions.
        spinner: Progress indicator shared by all steps.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        registry: VersionLookup | None = None,
        ask_answers: Callable[[], Answers] | None = None,
        confirm: Callable[[str], bool] | None = None,
        spinner: StepSpinner | None = None,
    ) -> None:
        self.config = config
        self.registry = registry or RegistryClient(
            base_url=config.registry_url,
            timeout=config.registry_timeout,
        )
        self.ask_answers = ask_answers or collect_answers
        self.confirm = confirm or confirm_overwrite
        self.spinner = spinner or StepSpinner()

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def write_project_files(self, project_dir: Path, manifest: PackageManifest) -> list[Path]:
        """Write ``package.json`` and ``tsconfig.json`` into *project_dir*."""
        manifest_path = await write_text_file(
            self.config.manifest_path(project_dir), manifest.to_json()
        )
        build_config_path = await write_text_file(
            self.config.build_config_path(project_dir), TSCONFIG_JSON
        )
        return [manifest_path, build_config_path]

    async def run(self, directory: str | Path = ".") -> Path:
        """Scaffold a project into *directory*.

        Returns:
            Absolute path of the generated project.

        Raises:
            OverwriteDeclinedError: If the user refuses to overwrite the target.
            RegistryLookupError: If a version lookup fails.
            InstallerError: If the package manager fails.
            OSError: On filesystem errors.
        """
        answers = self.ask_answers()
        project_dir = Path(os.path.abspath(directory))
        builder = ManifestBuilder(self.registry)

        with self.spinner.step("Creating package.json & tsconfig.json..."):
            manifest = await builder.build(answers)
            # The spinner would draw over the confirmation prompt.
            with self.spinner.paused():
                status = prepare_directory(project_dir, confirm=self.confirm)
            await self.write_project_files(project_dir, manifest)

        if status is DirectoryStatus.REPLACED:
            print_warning(f"Replaced previous contents of {project_dir}")

        with self.spinner.step("Copying template..."):
            await copy_template(project_dir, self.config.template_dir)

        # The installer writes to the terminal itself.
        with self.spinner.step("Installing dependencies. This may take a while."), self.spinner.paused():
            await install_dependencies(answers.package_manager, project_dir)

        self._print_done(project_dir, answers, manifest)
        return project_dir

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _print_done(self, project_dir: Path, answers: Answers, manifest: PackageManifest) -> None:
        console.print()
        print_summary_table(
            {
                "Package": manifest.name,
                "Directory": str(project_dir),
                "Package manager": answers.package_manager.value,
                **manifest.dev_dependencies,
            },
            title="Project created",
        )
        print_success("✨ Done!")
        console.print("You can start developing now! 🚀")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-ts-package``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-ts-package",
        description="Scaffold a TypeScript npm package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-ts-package my-lib\n"
            "  create-ts-package            # use the current directory\n"
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Target directory (default: current directory)",
    )

    args = parser.parse_args(argv)

    pipeline = ScaffoldPipeline(ScaffoldConfig())
    try:
        asyncio.run(pipeline.run(args.directory))
    except OverwriteDeclinedError:
        # Already reported by the spinner.
        sys.exit(1)


if __name__ == "__main__":
    main()
