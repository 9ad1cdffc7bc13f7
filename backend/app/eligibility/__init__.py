"""
Eligibility questionnaire — visibility resolution and response validation.

All functions here are pure and synchronous: they only read their
arguments and are safe to call from any thread.
"""

from app.eligibility.carrier import questions_from_carrier
from app.eligibility.conditions import (
    AllOf,
    Always,
    AnyOf,
    Condition,
    EqualsResponse,
    Never,
    ResponseIn,
    VisibilityRule,
)
from app.eligibility.models import (
    DynamicQuestionResponse,
    EligibilityQuestion,
    KnockoutAnswer,
    PossibleAnswer,
    QuestionValidation,
)
from app.eligibility.resolver import prune_hidden_responses, resolve_visible, visible_question_ids
from app.eligibility.validator import find_knockout_answers, get_required_errors, validate_responses

__all__ = [
    "AllOf",
    "Always",
    "AnyOf",
    "Condition",
    "DynamicQuestionResponse",
    "EligibilityQuestion",
    "EqualsResponse",
    "KnockoutAnswer",
    "Never",
    "PossibleAnswer",
    "QuestionValidation",
    "ResponseIn",
    "VisibilityRule",
    "find_knockout_answers",
    "get_required_errors",
    "prune_hidden_responses",
    "questions_from_carrier",
    "resolve_visible",
    "validate_responses",
    "visible_question_ids",
]
