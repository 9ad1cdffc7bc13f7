"""
Address validation and ZIP lookup endpoints.

Outcome mapping:
    Ok               -> 200 with payload
    input errors     -> 400
    NotFound         -> 404 (zip-info) / 200 with valid=false (validate-zip)
    UpstreamFailure  -> 500 with a fixed message; the diagnostic is only logged
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from app.api.deps import get_address_gateway, get_zip_gateway
from app.api.schemas.address import (
    AddressRequest,
    AddressValidationResponse,
    ZipCodeInfoResponse,
    ZipValidationResponse,
)
from app.core.constants import (
    ZIP_LOOKUP_FAILED_MESSAGE,
    ZIP_NOT_FOUND_MESSAGE,
    ZIP_VALIDATION_FAILED_MESSAGE,
)
from app.core.logging import get_logger
from app.gateway.address import AddressValidationGateway
from app.gateway.errors import GatewayInputError
from app.gateway.outcome import NotFound, Ok, UpstreamFailure
from app.gateway.zip_lookup import ZipLookupGateway

logger = get_logger(__name__)

router = APIRouter(prefix="/address", tags=["Address"])


def _bad_request(exc: GatewayInputError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.post("/validate", response_model=AddressValidationResponse)
async def validate_address(
    payload: AddressRequest,
    gateway: AddressValidationGateway = Depends(get_address_gateway),
):
    """Validate a structured address against the upstream verification service."""
    try:
        outcome = await gateway.validate_address(payload.to_address())
    except GatewayInputError as exc:
        raise _bad_request(exc) from None

    if isinstance(outcome, UpstreamFailure):
        body = AddressValidationResponse.from_result(outcome.fallback)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to validate address", **body.model_dump(by_alias=True)},
        )

    return AddressValidationResponse.from_result(outcome.payload)


@router.get("/zip-info", response_model=ZipCodeInfoResponse)
async def zip_info(
    zip_code: str | None = Query(None, alias="zipCode"),
    gateway: ZipLookupGateway = Depends(get_zip_gateway),
) -> ZipCodeInfoResponse:
    """Return city, state and county for a five-digit ZIP."""
    try:
        outcome = await gateway.get_zip_code_info(zip_code)
    except GatewayInputError as exc:
        raise _bad_request(exc) from None

    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ZIP_NOT_FOUND_MESSAGE)
    if isinstance(outcome, UpstreamFailure):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ZIP_LOOKUP_FAILED_MESSAGE,
        )

    return ZipCodeInfoResponse.from_info(outcome.payload)


@router.get("/validate-zip/{zip_code}", response_model=ZipValidationResponse)
async def validate_zip(
    zip_code: str,
    gateway: ZipLookupGateway = Depends(get_zip_gateway),
) -> ZipValidationResponse:
    """Check a ZIP against the upstream state lookup."""
    try:
        outcome = await gateway.get_state_abbreviation(zip_code)
    except GatewayInputError as exc:
        raise _bad_request(exc) from None

    if isinstance(outcome, Ok):
        return ZipValidationResponse(valid=True, zip_code=zip_code, state=outcome.payload)
    if isinstance(outcome, NotFound):
        return ZipValidationResponse(valid=False, zip_code=zip_code, error="ZIP code not found")

    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ZIP_VALIDATION_FAILED_MESSAGE,
    )
