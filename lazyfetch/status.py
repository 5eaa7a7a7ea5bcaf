"""
Status code policy applied to completed fetches.

2xx and 302 are successes. 400, 420 and every other non-success below 500
carry an application error in the body. Remaining 5xx codes pass through
so callers can decide on retries themselves.
"""

from __future__ import annotations

import enum
from http import HTTPStatus
from typing import Final

OK: Final = HTTPStatus.OK.value
MULTIPLE_CHOICES: Final = HTTPStatus.MULTIPLE_CHOICES.value
FOUND: Final = HTTPStatus.FOUND.value
BAD_REQUEST: Final = HTTPStatus.BAD_REQUEST.value
# Rate limit signal, not registered with IANA.
ENHANCE_YOUR_CALM: Final = 420
INTERNAL_SERVER_ERROR: Final = HTTPStatus.INTERNAL_SERVER_ERROR.value


class Outcome(enum.Enum):
    SUCCESS = "success"
    APPLICATION_ERROR = "application_error"
    PASS_THROUGH = "pass_through"


def is_success(status: int) -> bool:
    # 302 is the authentication redirect and counts as success.
    return OK <= status and (status < MULTIPLE_CHOICES or status == FOUND)


def classify(status: int) -> Outcome:
    if is_success(status):
        return Outcome.SUCCESS
    if (
        status == ENHANCE_YOUR_CALM
        or status == BAD_REQUEST
        or status < INTERNAL_SERVER_ERROR
    ):
        return Outcome.APPLICATION_ERROR
    return Outcome.PASS_THROUGH
