"""Run script.

Why it exists:
- `python -m main URL` from inside `src/` during development.
- Keeps a simple entry point alongside the installed `safebrowsing` script.
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; verdict bodies and URLs may not fit.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
