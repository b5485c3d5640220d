"""JSON rendering of a lookup.

Why JSON:
- Lets scripts and pipelines consume the verdict without scraping text output.
- The API key never appears: only the redacted request URL is included.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.services.lookup import LookupOutcome
from core.services.url_encoding import printable


def outcome_payload(outcome: LookupOutcome) -> dict[str, Any]:
    payload = outcome.verdict.model_dump(mode="json")
    payload["target"] = printable(outcome.target)
    payload["request_url"] = outcome.request.redacted_url()
    payload["body"] = outcome.result.body
    return payload


def render_outcome_json(outcome: LookupOutcome) -> str:
    """Stable, UTF-8 friendly JSON for one lookup."""

    return json.dumps(outcome_payload(outcome), ensure_ascii=False, indent=2, sort_keys=True)


def export_outcome_json(*, outcome: LookupOutcome, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_outcome_json(outcome) + "\n", encoding="utf-8")
    return output_path
