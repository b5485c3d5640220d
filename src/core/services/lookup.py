"""Lookup orchestration.

Builds the request from explicit configuration, performs the single HTTP
call and interprets the result. Printing stays in the CLI layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from adapters.http_client import build_client, fetch
from core.domain.models import LookupConfig, LookupRequest, LookupResult, Verdict
from core.errors import UsageError
from core.services.url_encoding import printable, url_encode
from core.services.verdict import interpret

logger = logging.getLogger(__name__)


@dataclass
class LookupOutcome:
    """What the CLI needs to report one lookup."""

    target: str
    request: LookupRequest
    result: LookupResult
    verdict: Verdict


def build_request(config: LookupConfig, api_key: str, target: str) -> LookupRequest:
    if not target:
        raise UsageError("Error: please supply a valid URL.")
    return LookupRequest(config=config, api_key=api_key, encoded_url=url_encode(target))


def execute(
    config: LookupConfig,
    api_key: str,
    target: str,
    *,
    transport: httpx.BaseTransport | None = None,
) -> LookupOutcome:
    """Run one lookup. Raises `NetworkError` on transport failure, no retry."""

    request = build_request(config, api_key, target)
    with build_client(config, transport=transport) as client:
        result = fetch(client, request)
    verdict = interpret(result)
    logger.debug("Verdict for %s: %s", printable(target), verdict.kind.value)
    return LookupOutcome(target=target, request=request, result=result, verdict=verdict)
