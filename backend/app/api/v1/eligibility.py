"""Eligibility questionnaire endpoints: visibility, validation, pruning."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from app.api.schemas.eligibility import (
    FriendlyErrorSchema,
    KnockoutAnswerSchema,
    PrunedResponsesResponse,
    QuestionnaireRequest,
    QuestionValidationResponse,
    ResponseSchema,
    VisibleQuestionsResponse,
)
from app.core.logging import get_logger
from app.eligibility.carrier import questions_from_carrier
from app.eligibility.formatting import inline_errors_by_question, to_friendly_validation_errors
from app.eligibility.models import EligibilityQuestion
from app.eligibility.resolver import prune_hidden_responses, visible_question_ids
from app.eligibility.validator import validate_responses

logger = get_logger(__name__)

router = APIRouter(prefix="/eligibility", tags=["Eligibility"])


def _questions(payload: QuestionnaireRequest) -> list[EligibilityQuestion]:
    """Domain questions from either the domain or the carrier form."""
    if not payload.carrier_questions:
        return [q.to_domain() for q in payload.questions]

    try:
        questions = questions_from_carrier(payload.carrier_questions)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Malformed carrier question payload", error=str(exc))
        raise HTTPException(
            status_code=422,
            detail=f"Malformed carrier question: {exc}",
        ) from None

    ids = [q.question_id for q in questions]
    if len(ids) != len(set(ids)):
        raise HTTPException(
            status_code=422,
            detail="questionId values must be unique within a question set",
        )
    return questions


@router.post("/visible", response_model=VisibleQuestionsResponse)
async def visible_questions(payload: QuestionnaireRequest) -> VisibleQuestionsResponse:
    """Return the ids of the questions currently visible."""
    questions = _questions(payload)
    return VisibleQuestionsResponse(
        visible_question_ids=visible_question_ids(questions, payload.domain_responses()),
        total_questions=len(questions),
    )


@router.post("/validate", response_model=QuestionValidationResponse)
async def validate_questionnaire(payload: QuestionnaireRequest) -> QuestionValidationResponse:
    """Validate responses: required answers, knockout answers, form verdict."""
    questions = _questions(payload)
    validation = validate_responses(questions, payload.domain_responses())
    friendly = to_friendly_validation_errors(validation.errors, questions)

    logger.info(
        "Questionnaire validated",
        total_questions=len(questions),
        visible_questions=len(validation.visible_question_ids),
        is_valid=validation.is_valid,
        knockouts=len(validation.knockout_answers),
    )

    return QuestionValidationResponse(
        is_valid=validation.is_valid,
        errors=validation.errors,
        knockout_answers=[KnockoutAnswerSchema.from_domain(k) for k in validation.knockout_answers],
        has_knockout_answers=validation.has_knockout_answers,
        visible_question_ids=validation.visible_question_ids,
        remaining_count=validation.remaining_count,
        friendly_errors=[FriendlyErrorSchema.from_domain(f) for f in friendly],
        inline_errors=inline_errors_by_question(validation),
    )


@router.post("/prune", response_model=PrunedResponsesResponse)
async def prune_responses(payload: QuestionnaireRequest) -> PrunedResponsesResponse:
    """Drop responses to questions that are hidden or unknown."""
    questions = _questions(payload)
    responses = payload.domain_responses()
    kept = prune_hidden_responses(questions, responses)
    return PrunedResponsesResponse(
        responses=[ResponseSchema.from_domain(r) for r in kept],
        removed_count=len(responses) - len(kept),
    )
