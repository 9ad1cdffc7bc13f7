"""
GatewayOutcome — explicit result type returned by every gateway call.

    Ok(payload)                 upstream answered with a usable record
    NotFound()                  valid input, upstream has no record
    UpstreamFailure(diagnostic) upstream call failed; diagnostic is for logs

The transport layer is the only place that turns UpstreamFailure into a
user-facing message.  The diagnostic stays available for operators and is
never rendered to end users.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful gateway call carrying its payload."""

    payload: T


@dataclass(frozen=True)
class NotFound:
    """Upstream has no record for otherwise valid input."""


@dataclass(frozen=True)
class UpstreamFailure:
    """
    Upstream call failed.

    Args:
        diagnostic: Original error text, for logging only.
        status_code: Upstream HTTP status if one was received.
        fallback: Optional user-safe payload the transport may render
                  (e.g. an invalid AddressValidationResult).
    """

    diagnostic: str
    status_code: int | None = None
    fallback: Any = None


GatewayOutcome = Union[Ok[T], NotFound, UpstreamFailure]
