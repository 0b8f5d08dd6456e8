"""Async client for the npm registry.

Wraps the registry's ``GET /<package>/latest`` document to answer one
question: which version of a package is currently tagged ``latest``.
Lookups are not retried and any failure raises ``RegistryLookupError`` so
that the caller can abort the whole run.

Typical usage::

    client = RegistryClient()
    version = await client.latest_version("typescript")
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from create_ts_package.config import DEFAULT_REGISTRY_URL
from create_ts_package.errors import ScaffoldError


class RegistryLookupError(ScaffoldError):
    """Raised when the latest version of a package cannot be resolved."""

    def __init__(self, package: str, reason: str) -> None:
        self.package = package
        self.reason = reason
        super().__init__(f"Could not resolve latest version of '{package}': {reason}")


class RegistryClient:
    """Async client for an npm-compatible registry.

    Uses ``httpx.AsyncClient`` for non-blocking HTTP.  With ``timeout=None``
    (the default) a request waits for as long as the registry takes.
    """

    def __init__(self, base_url: str = DEFAULT_REGISTRY_URL, timeout: float | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
        )

    @staticmethod
    def _latest_path(package: str) -> str:
        """Build the request path for *package*.

        Scoped names keep their ``@`` but the scope separator is encoded
        (``@types/node`` -> ``/@types%2Fnode/latest``).
        """
        return f"/{quote(package, safe='@')}/latest"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def latest_version(self, package: str) -> str:
        """Return the version string tagged ``latest`` for *package*.

        Raises:
            RegistryLookupError: On connection errors, timeouts, unknown
                packages, non-2xx responses or a malformed document.
        """
        try:
            async with self._client() as client:
                response = await client.get(self._latest_path(package))
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 404:
                raise RegistryLookupError(package, "package not found in registry") from exc
            raise RegistryLookupError(package, f"registry returned HTTP {status}") from exc
        except httpx.TimeoutException as exc:
            reason = f"request to {self.base_url} timed out"
            if self.timeout is not None:
                reason += f" after {self.timeout}s"
            raise RegistryLookupError(package, reason) from exc
        except httpx.HTTPError as exc:
            raise RegistryLookupError(
                package, f"cannot reach {self.base_url}: {exc}"
            ) from exc
        except ValueError as exc:
            raise RegistryLookupError(package, "registry response is not valid JSON") from exc

        version = data.get("version") if isinstance(data, dict) else None
        if not isinstance(version, str) or not version:
            raise RegistryLookupError(package, "registry response has no version field")
        return version
