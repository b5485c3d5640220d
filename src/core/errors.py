"""Error hierarchy.

Adapters raise these; the CLI catches `SafeBrowsingError`, reports it on
stderr and exits non-zero. Nothing is retried.
"""

from __future__ import annotations

from pathlib import Path


class SafeBrowsingError(Exception):
    """Base class for errors that end the current invocation."""


class UsageError(SafeBrowsingError):
    """Missing or invalid command-line input."""


class KeyFileError(SafeBrowsingError):
    """The API key file could not be read, created or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message} ({path})")
        self.path = path


class NetworkError(SafeBrowsingError):
    """Transport-level failure (DNS, TLS, connection reset, timeout)."""
