"""
Exception hierarchy for the address gateways.

Input-shape problems are raised as GatewayInputError subclasses before any
upstream call is made; the API layer maps them to 400 responses.  Upstream
failures are never raised to callers: they become UpstreamFailure outcomes
(see app.gateway.outcome).  UpstreamCallError is the internal signal the
HTTP client uses to hand a failure to the gateway.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.operation = operation
        self.details = details or {}
        super().__init__(message)


class GatewayInputError(GatewayError):
    """Caller input was rejected before reaching the upstream service."""
    pass


class MissingFieldError(GatewayInputError):
    """One or more required fields are missing or blank."""

    def __init__(
        self,
        message: str,
        *,
        fields: list[str] | None = None,
        **kwargs,
    ) -> None:
        self.fields = fields or []
        super().__init__(message, **kwargs)


class InvalidFormatError(GatewayInputError):
    """A field is present but fails its format check."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: str | None = None,
        **kwargs,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, **kwargs)


class UpstreamCallError(GatewayError):
    """The upstream address service failed or answered something unusable."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: str | None = None,
        **kwargs,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, **kwargs)
