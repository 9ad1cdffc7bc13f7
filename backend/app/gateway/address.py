"""
AddressValidationGateway — validates a structured address upstream.

Flow::

    Address ─► required-field check ─► AddressServiceClient.validate_address
                     │                              │
             MissingFieldError              Ok(result) | UpstreamFailure

Required fields are checked after trimming and short-circuit before any
upstream call.  The upstream is called exactly once; no retry.
"""

from __future__ import annotations

from typing import Any

from app.core.constants import ADDRESS_NOT_VERIFIED_MESSAGE, ADDRESS_VALIDATION_FAILED_MESSAGE
from app.core.logging import get_logger
from app.gateway.client import AddressServiceClient
from app.gateway.errors import MissingFieldError, UpstreamCallError
from app.gateway.models import Address, AddressValidationResult
from app.gateway.outcome import GatewayOutcome, Ok, UpstreamFailure

logger = get_logger(__name__)

REQUIRED_ADDRESS_FIELDS = ["line1", "city", "state", "zip"]

# Keys the upstream may use for its verdict / defect list, in priority order
VERDICT_KEYS = ("isValid", "deliverable", "valid")
ERROR_KEYS = ("errors", "messages", "defects")
NORMALIZED_KEYS = ("normalizedAddress", "address")


class AddressValidationGateway:
    """Adapts Address values to the upstream verification contract."""

    def __init__(self, client: AddressServiceClient) -> None:
        self.client = client

    async def validate_address(self, address: Address) -> GatewayOutcome[AddressValidationResult]:
        """
        Validate an address.

        Raises:
            MissingFieldError: line1, city, state or zip is blank.

        Returns:
            Ok(AddressValidationResult) when the upstream gave a verdict,
            UpstreamFailure when it could not be reached or understood.
        """
        address = address.trimmed()
        missing = [name for name in REQUIRED_ADDRESS_FIELDS if not getattr(address, name)]
        if missing:
            logger.info("Address rejected before validation", missing_fields=missing)
            raise MissingFieldError(
                "Missing required fields: " + ", ".join(missing),
                operation="validate_address",
                fields=missing,
            )

        log = logger.bind(city=address.city, state=address.state, zip_code=address.zip)
        log.info("Validating address")

        try:
            data = await self.client.validate_address(address.to_upstream())
            result = self._parse(data)
        except UpstreamCallError as exc:
            log.error(
                "Address validation upstream failure",
                diagnostic=exc.message,
                status_code=exc.status_code,
            )
            return UpstreamFailure(
                diagnostic=exc.message,
                status_code=exc.status_code,
                fallback=AddressValidationResult(
                    is_valid=False,
                    errors=[ADDRESS_VALIDATION_FAILED_MESSAGE],
                ),
            )

        log.info("Address validation complete", is_valid=result.is_valid, errors=len(result.errors))
        return Ok(result)

    def _parse(self, data: dict[str, Any]) -> AddressValidationResult:
        """Map the upstream verdict into an AddressValidationResult."""
        verdict = next((data[key] for key in VERDICT_KEYS if key in data), None)
        if not isinstance(verdict, bool):
            raise UpstreamCallError(
                "Address validation response has no boolean verdict",
                operation="validate_address",
                response_body=str(data),
            )

        normalized = self._parse_normalized(
            next((data[key] for key in NORMALIZED_KEYS if key in data), None)
        )

        if verdict:
            return AddressValidationResult(is_valid=True, errors=[], normalized_address=normalized)

        raw_errors = next((data[key] for key in ERROR_KEYS if key in data), None) or []
        if isinstance(raw_errors, str):
            raw_errors = [raw_errors]
        if not isinstance(raw_errors, list):
            raise UpstreamCallError(
                "Address validation errors are not a list",
                operation="validate_address",
                response_body=str(data),
            )
        errors = [str(err).strip() for err in raw_errors if str(err).strip()]
        if not errors:
            errors = [ADDRESS_NOT_VERIFIED_MESSAGE]
        return AddressValidationResult(is_valid=False, errors=errors, normalized_address=normalized)

    def _parse_normalized(self, raw: Any) -> Address | None:
        if not isinstance(raw, dict):
            return None
        return Address(
            line1=str(raw.get("address1") or raw.get("line1") or ""),
            line2=str(raw.get("address2") or raw.get("line2") or ""),
            city=str(raw.get("city") or ""),
            state=str(raw.get("state") or ""),
            zip=str(raw.get("zip") or raw.get("zipCode") or ""),
        )
