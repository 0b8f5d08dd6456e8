"""Base exception for the scaffolder.

Concrete errors live next to the code that raises them:

* ``OverwriteDeclinedError`` -- :mod:`create_ts_package.scaffolder.directory`
* ``RegistryLookupError`` -- :mod:`create_ts_package.registry_client`
* ``InstallerError`` -- :mod:`create_ts_package.scaffolder.installer`

Filesystem failures are left as the built-in ``OSError`` subclasses.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Root of every error raised deliberately by create-ts-package."""
