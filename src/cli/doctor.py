"""Doctor command for environment diagnostics and key setup."""

from __future__ import annotations

from urllib.parse import urlsplit

import httpx
import typer

from adapters.http_client import build_client
from adapters.key_store import KeyStore, first_token
from cli.ui_components import build_doctor_table, console, print_banner, print_error
from core.config import AppSettings, get_user_env_file
from core.domain.models import LookupConfig
from core.errors import SafeBrowsingError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and key setup.")


def _check_http(config: LookupConfig) -> tuple[bool, str]:
    parts = urlsplit(config.endpoint)
    origin = f"{parts.scheme}://{parts.netloc}/"
    try:
        with build_client(config, follow_redirects=True) as client:
            response = client.get(origin)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    config = settings.lookup_config()
    store = KeyStore(settings.key_file)

    print_banner(console)
    table = build_doctor_table()

    if store.exists():
        try:
            store.load()
            table.add_row("API key", "OK", str(store.path))
        except SafeBrowsingError as exc:
            table.add_row("API key", "FAIL", str(exc))
    else:
        table.add_row("API key", "MISSING", f"{store.path} (prompted on first lookup)")

    table.add_row("Endpoint", "OK", config.endpoint)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_http, detail_http = _check_http(config)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    console.print(table)


@app.command(name="setup-key")
def setup_key() -> None:
    """Store (or replace) the API key used for lookups."""

    settings = AppSettings()
    store = KeyStore(settings.key_file)

    raw = typer.prompt("Categorization key", hide_input=True, confirmation_prompt=False)
    try:
        path = store.save(first_token(raw))
    except SafeBrowsingError as exc:
        print_error(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[green]Saved key to:[/green] {path}")
