"""Precondition failures.

Violated preconditions are caller bugs, not runtime conditions. They are
reported immediately with a descriptive cause and are never retried.
Conditions that have a meaningful "no result" (no common type, an indefinite
bound) are ordinary return values and never raise.
"""

from __future__ import annotations

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


class PreconditionError(AssertionError):
    """A function was called with arguments that violate its contract."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


def fail(cause: str) -> NoReturn:
    """Abort the current operation with `cause`."""
    logger.debug("precondition violated: %s", cause)
    raise PreconditionError(cause)


def require(condition: object, cause: str) -> None:
    """Fail with `cause` unless `condition` is truthy."""
    if not condition:
        fail(cause)
