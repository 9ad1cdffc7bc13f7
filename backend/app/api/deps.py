"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends

from app.core.config import settings
from app.gateway.address import AddressValidationGateway
from app.gateway.client import AddressServiceClient
from app.gateway.zip_lookup import ZipLookupGateway


async def get_address_client() -> AsyncGenerator[AddressServiceClient, None]:
    """Yield a request-scoped address service client, closed afterwards."""
    async with AddressServiceClient(
        base_url=settings.ADDRESS_API_BASE_URL,
        auth_token=settings.ADDRESS_API_AUTH_TOKEN,
        timeout=settings.ADDRESS_API_TIMEOUT_SECONDS,
    ) as client:
        yield client


def get_address_gateway(
    client: AddressServiceClient = Depends(get_address_client),
) -> AddressValidationGateway:
    return AddressValidationGateway(client)


def get_zip_gateway(
    client: AddressServiceClient = Depends(get_address_client),
) -> ZipLookupGateway:
    return ZipLookupGateway(client)
