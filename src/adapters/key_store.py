"""API key persistence.

The key file holds the key and nothing else. It is read on every run and
written once, on first run, from an interactive prompt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from core.errors import KeyFileError, UsageError

logger = logging.getLogger(__name__)

KEY_PROMPT = "Please insert your categorization key below."


def first_token(raw: str) -> str:
    """Keep the first whitespace-delimited token of user input."""

    parts = raw.split()
    if not parts:
        raise UsageError("No categorization key was supplied.")
    return parts[0]


class KeyStore:
    """Reads or provisions the API key at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> str:
        """Return the first line of the key file, trailing newline removed."""

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                line = handle.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise KeyFileError("Something went wrong while reading from file", self.path) from exc
        key = line.rstrip("\r\n")
        if not key:
            raise KeyFileError("Key file is empty", self.path)
        return key

    def save(self, key: str) -> Path:
        """Write `key` verbatim, replacing any existing file."""

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(key, encoding="utf-8")
        except OSError as exc:
            raise KeyFileError("Something went wrong while writing to file", self.path) from exc
        logger.info("Stored categorization key in %s", self.path)
        return self.path

    def load_or_provision(self, prompt: Callable[[str], str]) -> str:
        """Load the stored key, or ask for one via `prompt` and persist it."""

        if self.path.exists():
            return self.load()

        logger.debug("No key file at %s, prompting", self.path)
        key = first_token(prompt(KEY_PROMPT))
        self.save(key)
        return key
