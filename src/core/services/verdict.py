"""Maps a `LookupResult` to a `Verdict`.

Pure function, no state between calls.
"""

from __future__ import annotations

from http import HTTPStatus

from core.domain.models import LookupResult, Verdict, VerdictKind

REPLY_SAFE = "safe"

_OK_STATUSES = {
    HTTPStatus.OK: "200 OK",
    HTTPStatus.NO_CONTENT: "204 NO CONTENT",
}


def interpret(result: LookupResult) -> Verdict:
    status = result.status_code

    if status in _OK_STATUSES:
        if result.has_body:
            return Verdict(
                kind=VerdictKind.LISTED,
                status_code=status,
                text=result.body.strip() or result.body,
                message=f"Your code is: {_OK_STATUSES[status]}.",
            )
        return Verdict(
            kind=VerdictKind.SAFE,
            status_code=status,
            text=REPLY_SAFE,
            message=f"Your code is: {_OK_STATUSES[status]}.",
        )

    if status == HTTPStatus.BAD_REQUEST:
        return Verdict(
            kind=VerdictKind.BAD_REQUEST,
            status_code=status,
            message="Your code is: 400 BAD REQUEST. (Please check the syntax of your URL!)",
        )

    if status == 0:
        return Verdict(
            kind=VerdictKind.NO_RESPONSE,
            status_code=0,
            message="Something went wrong while performing your request: no response received.",
        )

    return Verdict(
        kind=VerdictKind.UNEXPECTED_STATUS,
        status_code=status,
        message=f"Your code is: {status}",
    )
