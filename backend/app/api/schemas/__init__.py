"""API schema package."""

from app.api.schemas.address import (
    AddressRequest,
    AddressValidationResponse,
    ZipCodeInfoResponse,
    ZipValidationResponse,
)
from app.api.schemas.eligibility import (
    PrunedResponsesResponse,
    QuestionnaireRequest,
    QuestionValidationResponse,
    VisibleQuestionsResponse,
)

__all__ = [
    "AddressRequest",
    "AddressValidationResponse",
    "ZipCodeInfoResponse",
    "ZipValidationResponse",
    "QuestionnaireRequest",
    "QuestionValidationResponse",
    "VisibleQuestionsResponse",
    "PrunedResponsesResponse",
]
