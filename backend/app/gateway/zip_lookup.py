"""
ZipLookupGateway — ZIP code metadata and state lookups.

Both operations check the ZIP format locally and never call upstream for
malformed input.  A ZIP with no upstream record is a NotFound outcome,
not a failure.
"""

from __future__ import annotations

import re
from typing import Any

from app.core.logging import get_logger
from app.gateway.client import AddressServiceClient
from app.gateway.errors import InvalidFormatError, MissingFieldError, UpstreamCallError
from app.gateway.models import CountyRecord, ZipCodeInfo
from app.gateway.outcome import GatewayOutcome, NotFound, Ok, UpstreamFailure

logger = get_logger(__name__)

# ASCII digits only; str.isdigit() would also accept other scripts
ZIP_PATTERN = re.compile(r"[0-9]{5}")


def check_zip_format(zip_code: str | None, operation: str) -> str:
    """Return the ZIP if it is exactly five ASCII digits, else raise."""
    if zip_code is None or zip_code == "":
        raise MissingFieldError(
            "ZIP code is required",
            operation=operation,
            fields=["zip"],
        )
    if not ZIP_PATTERN.fullmatch(zip_code):
        raise InvalidFormatError(
            "ZIP code must be 5 digits",
            operation=operation,
            field="zip",
            value=zip_code,
        )
    return zip_code


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _county_record(raw: dict[str, Any]) -> CountyRecord:
    return CountyRecord(
        county=str(raw.get("county") or ""),
        city=str(raw.get("city") or ""),
        state=str(raw.get("state") or ""),
        county_fips_code=_optional_str(raw.get("countyFipsCode")),
        state_fips_code=_optional_str(raw.get("stateFipsCode")),
        deliverable=bool(raw.get("deliverable", True)),
        preferred=bool(raw.get("preferred", False)),
    )


class ZipLookupGateway:
    """Adapts ZIP lookups to the upstream reference service."""

    def __init__(self, client: AddressServiceClient) -> None:
        self.client = client

    async def get_zip_code_info(self, zip_code: str | None) -> GatewayOutcome[ZipCodeInfo]:
        """
        Look up city, state and county for a ZIP.

        The preferred county record is used when the upstream flags one,
        otherwise the first record.

        Raises:
            MissingFieldError: no ZIP supplied.
            InvalidFormatError: ZIP is not exactly five digits.
        """
        zip_code = check_zip_format(zip_code, "get_zip_code_info")
        log = logger.bind(zip_code=zip_code)

        try:
            raw_records = await self.client.get_counties(zip_code)
            records = [_county_record(raw) for raw in raw_records or [] if isinstance(raw, dict)]
            if raw_records and not records:
                raise UpstreamCallError(
                    "County records are not objects",
                    operation="get_zip_code_info",
                    response_body=str(raw_records),
                )
        except UpstreamCallError as exc:
            log.error(
                "ZIP lookup upstream failure",
                diagnostic=exc.message,
                status_code=exc.status_code,
            )
            return UpstreamFailure(diagnostic=exc.message, status_code=exc.status_code)

        if not records:
            log.info("ZIP code not found")
            return NotFound()

        chosen = next((record for record in records if record.preferred), records[0])
        log.info("ZIP lookup complete", state=chosen.state, options=len(records))
        return Ok(ZipCodeInfo(
            zip=zip_code,
            city=chosen.city,
            state=chosen.state,
            county=chosen.county,
            county_fips_code=chosen.county_fips_code,
            deliverable=chosen.deliverable,
            preferred=chosen.preferred,
            all_options=records,
        ))

    async def get_state_abbreviation(self, zip_code: str | None) -> GatewayOutcome[str]:
        """
        Resolve the two-letter state for a ZIP.

        Raises:
            MissingFieldError: no ZIP supplied.
            InvalidFormatError: ZIP is not exactly five digits.
        """
        zip_code = check_zip_format(zip_code, "get_state_abbreviation")
        log = logger.bind(zip_code=zip_code)

        try:
            state = await self.client.get_state_abbreviation(zip_code)
        except UpstreamCallError as exc:
            log.error(
                "State lookup upstream failure",
                diagnostic=exc.message,
                status_code=exc.status_code,
            )
            return UpstreamFailure(diagnostic=exc.message, status_code=exc.status_code)

        if not state:
            log.info("ZIP code has no state")
            return NotFound()

        log.info("State lookup complete", state=state)
        return Ok(state)
