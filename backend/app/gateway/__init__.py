"""
Address gateways — adapters between applicant addresses and the upstream
address verification / ZIP reference service.

Input errors are raised; upstream results come back as GatewayOutcome
values (Ok / NotFound / UpstreamFailure).
"""

from app.gateway.address import AddressValidationGateway
from app.gateway.client import AddressServiceClient
from app.gateway.errors import GatewayInputError, InvalidFormatError, MissingFieldError
from app.gateway.models import Address, AddressValidationResult, ZipCodeInfo
from app.gateway.outcome import GatewayOutcome, NotFound, Ok, UpstreamFailure
from app.gateway.zip_lookup import ZipLookupGateway

__all__ = [
    "Address",
    "AddressServiceClient",
    "AddressValidationGateway",
    "AddressValidationResult",
    "GatewayInputError",
    "GatewayOutcome",
    "InvalidFormatError",
    "MissingFieldError",
    "NotFound",
    "Ok",
    "UpstreamFailure",
    "ZipCodeInfo",
    "ZipLookupGateway",
]
