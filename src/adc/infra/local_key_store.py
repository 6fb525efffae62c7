"""Local-filesystem implementation of :class:`~adc.core.protocols.KeyStore`."""

from __future__ import annotations

from pathlib import Path


class LocalKeyStore:
    """Answers existence queries against the local filesystem.

    Only existence is checked.  Readability, permission bits and key
    content are never inspected; a directory at the path also counts.
    """

    def exists(self, path: str) -> bool:
        return Path(path).exists()
