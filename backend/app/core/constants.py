"""Shared constants and enums used across the application."""

from enum import StrEnum


class QuestionType(StrEnum):
    """Question categories returned in carrier application bundles."""

    ELIGIBILITY = "Eligibility"
    AUTHORIZATION = "Authorization"
    PRE_EX = "PreEx"
    HRF = "HRF"
    GENERAL_QUESTION = "GeneralQuestion"
    PRIOR_INSURANCE = "PriorInsurance"
    CREDITABLE = "Creditable"
    HIDDEN = "Hidden"


class AnswerType(StrEnum):
    """Input control used for a possible answer."""

    RADIO = "Radio"
    CHECKBOX = "Checkbox"
    FREE_TEXT = "FreeText"
    DATE = "Date"
    MONTH_YEAR_DATE = "MonthYearDate"
    TEXT_AREA = "TextArea"


# ── User-facing messages ──────────────────────
ADDRESS_VALIDATION_FAILED_MESSAGE = "Failed to validate address. Please try again."
ADDRESS_NOT_VERIFIED_MESSAGE = "Address could not be verified."
ZIP_NOT_FOUND_MESSAGE = "ZIP code not found or invalid"
ZIP_LOOKUP_FAILED_MESSAGE = "Failed to get ZIP code information"
ZIP_VALIDATION_FAILED_MESSAGE = "Failed to validate ZIP code"

REQUIRED_ERROR_TEMPLATE = "Question {question_id} is required"
KNOCKOUT_ERROR_TEMPLATE = "Question {question_id} answer disqualifies applicant"
