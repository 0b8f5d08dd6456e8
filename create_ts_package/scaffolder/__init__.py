"""Building blocks of a scaffolding run.

Quick usage::

    from create_ts_package.scaffolder import ManifestBuilder, prepare_directory

    manifest = await ManifestBuilder(registry).build(answers)
    prepare_directory("my-lib")
"""

from create_ts_package.scaffolder.directory import (
    DirectoryStatus,
    OverwriteDeclinedError,
    prepare_directory,
)
from create_ts_package.scaffolder.installer import InstallerError, install_dependencies
from create_ts_package.scaffolder.manifest import ManifestBuilder
from create_ts_package.scaffolder.models import Answers, PackageManager, PackageManifest
from create_ts_package.scaffolder.prompts import collect_answers, confirm_overwrite
from create_ts_package.scaffolder.templates import copy_template
from create_ts_package.scaffolder.tsconfig import TSCONFIG_JSON

__all__ = [
    "Answers",
    "DirectoryStatus",
    "InstallerError",
    "ManifestBuilder",
    "OverwriteDeclinedError",
    "PackageManager",
    "PackageManifest",
    "TSCONFIG_JSON",
    "collect_answers",
    "confirm_overwrite",
    "copy_template",
    "install_dependencies",
    "prepare_directory",
]
