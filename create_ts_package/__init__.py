"""create-ts-package -- interactive scaffolder for TypeScript npm packages.

Asks a handful of questions, writes ``package.json`` and ``tsconfig.json``
with the latest ``nodemon`` / ``typescript`` versions from the npm registry,
copies a starter template and installs dependencies with yarn or npm.

Quick usage::

    create-ts-package my-lib
    python -m create_ts_package my-lib
"""

__version__ = "0.1.0"
