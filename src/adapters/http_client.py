"""httpx wrapper.

Why a wrapper:
- Standardises timeout and headers for the lookup request.
- Eases testing: a `httpx.MockTransport` can be injected in place of the network.
"""

from __future__ import annotations

import logging

import httpx

from core.domain.models import LookupConfig, LookupRequest, LookupResult
from core.errors import NetworkError

logger = logging.getLogger(__name__)


def build_client(
    config: LookupConfig,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
    follow_redirects: bool = False,
) -> httpx.Client:
    """Create a `httpx.Client` with the lookup defaults.

    Why a builder:
    - Every caller (lookup, doctor) gets the same timeout and User-Agent.
    - Tests pass `transport` to avoid real network access.

    Redirects are not followed by default: a 3xx from the lookup endpoint is
    reported as its raw status code.
    """

    headers: dict[str, str] = {
        "User-Agent": config.user_agent,
        "Accept": "text/plain, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=follow_redirects,
        headers=headers,
        transport=transport,
    )


def fetch(client: httpx.Client, request: LookupRequest) -> LookupResult:
    """Send the GET and read the body to completion.

    The body is accumulated chunk by chunk, with no size ceiling.
    """

    logger.debug("GET %s", request.redacted_url())
    buffer = bytearray()
    try:
        with client.stream("GET", request.url()) as response:
            for chunk in response.iter_bytes():
                buffer.extend(chunk)
            status_code = response.status_code
            encoding = response.encoding or "utf-8"
    except httpx.TransportError as exc:
        logger.debug("Transport failure: %r", exc)
        raise NetworkError(f"request failed: {exc}") from exc

    body = buffer.decode(encoding, errors="replace")
    logger.info("GET request performed correctly with URL: %s", request.redacted_url())
    logger.debug("HTTP %s, %d bytes", status_code, len(buffer))
    return LookupResult(status_code=status_code, body=body)
