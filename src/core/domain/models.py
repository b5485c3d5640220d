"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- Verdicts serialise straight to JSON for `--json` output.

Note:
- These models describe *what* a lookup is, not *how* it is performed.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

REDACTED = "***"


class LookupConfig(BaseModel):
    """Immutable wire-level constants for the lookup API.

    Built by `AppSettings.lookup_config()`, which holds the defaults. Passed
    explicitly into the lookup so tests can target mock endpoints.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(
        ...,
        min_length=1,
        description="Lookup API endpoint (scheme, host and path).",
    )
    client: str = Field(..., min_length=1)
    appver: str = Field(..., min_length=1)
    pver: str = Field(..., min_length=1)
    timeout_seconds: float = Field(
        ...,
        gt=0,
        description="Transport timeout (seconds).",
    )
    user_agent: str = Field(..., min_length=1)


class LookupRequest(BaseModel):
    """One lookup: configuration, API key and the already-encoded target URL."""

    model_config = ConfigDict(frozen=True)

    config: LookupConfig
    api_key: str = Field(..., min_length=1, repr=False)
    encoded_url: str = Field(
        ...,
        description="Target URL, percent-encoded for use as a query value.",
    )

    def _render(self, api_key: str) -> str:
        params = (
            ("client", self.config.client),
            ("apikey", api_key),
            ("appver", self.config.appver),
            ("pver", self.config.pver),
            ("url", self.encoded_url),
        )
        query = "&".join(f"{name}={value}" for name, value in params)
        return f"{self.config.endpoint}?{query}"

    def url(self) -> str:
        """Full request URL, parameters in wire order."""

        return self._render(self.api_key)

    def redacted_url(self) -> str:
        """Request URL with the API key masked (safe for logs and output)."""

        return self._render(REDACTED)


class LookupResult(BaseModel):
    """Raw outcome of a lookup: HTTP status plus body text.

    A status of 0 means no response was obtained at all.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., ge=0)
    body: str = Field(default="")

    @property
    def has_body(self) -> bool:
        return bool(self.body)


class VerdictKind(str, Enum):
    SAFE = "safe"
    LISTED = "listed"
    BAD_REQUEST = "bad_request"
    NO_RESPONSE = "no_response"
    UNEXPECTED_STATUS = "unexpected_status"


class Verdict(BaseModel):
    """Interpreted lookup outcome, ready for presentation."""

    kind: VerdictKind
    status_code: int = Field(..., ge=0)
    text: str | None = Field(
        default=None,
        description="Safety verdict (`safe` or the service label). None when no verdict applies.",
    )
    message: str = Field(
        default="",
        description="Human-readable status line.",
    )

    @property
    def is_verdict(self) -> bool:
        """True when the service gave a safety determination."""

        return self.kind in (VerdictKind.SAFE, VerdictKind.LISTED)

    @property
    def is_failure(self) -> bool:
        return self.kind in (VerdictKind.BAD_REQUEST, VerdictKind.NO_RESPONSE)

    @property
    def exit_code(self) -> int:
        return 1 if self.is_failure else 0
