"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- The lookup command and the doctor share consoles and tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import VerdictKind
from core.services.lookup import LookupOutcome
from core.services.url_encoding import printable

# Results on stdout, diagnostics on stderr.
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def print_banner(out: Console) -> None:
    title = Text("safebrowsing", style="bold cyan")
    subtitle = Text("URL reputation lookup", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    out.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_error(message: str) -> None:
    err_console.print(message, style="red", markup=False, soft_wrap=True)


def print_outcome(outcome: LookupOutcome) -> None:
    """Print a lookup the way the classic command-line tool did."""

    verdict = outcome.verdict

    if verdict.kind is VerdictKind.NO_RESPONSE:
        print_error(verdict.message)
        return

    console.print(
        f"GET request performed correctly with URL: {outcome.request.redacted_url()}\n",
        markup=False,
        soft_wrap=True,
    )

    if verdict.is_verdict:
        console.print(verdict.message, markup=False, soft_wrap=True)
        console.print(
            f"\nThe website {printable(outcome.target)} seems to be {verdict.text}.\n",
            markup=False,
            soft_wrap=True,
        )
    elif verdict.kind is VerdictKind.BAD_REQUEST:
        print_error(verdict.message)
    else:
        console.print(verdict.message, markup=False, soft_wrap=True)


def build_doctor_table() -> Table:
    table = Table(title="safebrowsing doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")
    return table
