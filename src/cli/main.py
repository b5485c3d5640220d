"""`safebrowsing` command.

Usage: `safebrowsing URL`. Reads (or provisions on first run) the API key,
performs one lookup and prints the verdict.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from adapters.json_exporter import export_outcome_json, render_outcome_json
from adapters.key_store import KeyStore
from cli.ui_components import console, print_error, print_outcome
from core.config import AppSettings
from core.errors import SafeBrowsingError
from core.logging_config import setup_logging
from core.services.lookup import execute

app = typer.Typer(
    add_completion=False,
    help="Check a URL against the Safe Browsing lookup service.",
)

logger = logging.getLogger(__name__)


def _prompt_key(message: str) -> str:
    return typer.prompt(message, prompt_suffix="\n")


@app.command()
def lookup(
    url: str = typer.Argument(..., help="URL to classify."),
    key_file: Path | None = typer.Option(
        None,
        "--key-file",
        "-k",
        help="API key file (default: categorization.key, or SAFEBROWSING_KEY_FILE).",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the verdict as JSON."),
    json_out: Path | None = typer.Option(None, "--json-out", help="Also write the verdict JSON to this file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Classify URL as safe or malicious."""

    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    store = KeyStore(key_file or settings.key_file)
    try:
        api_key = store.load_or_provision(_prompt_key)
        outcome = execute(settings.lookup_config(), api_key, url)
    except SafeBrowsingError as exc:
        logger.debug("Lookup aborted", exc_info=exc)
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    if json_output:
        console.print(render_outcome_json(outcome), markup=False, soft_wrap=True)
    else:
        print_outcome(outcome)

    if json_out is not None:
        export_outcome_json(outcome=outcome, output_path=json_out)

    if outcome.verdict.exit_code:
        raise typer.Exit(code=outcome.verdict.exit_code)


def run() -> None:
    app()
