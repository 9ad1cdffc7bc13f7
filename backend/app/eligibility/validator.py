"""
Response validation for eligibility questionnaires.

get_required_errors() is the core contract: one
"Question {id} is required" message per visible question without a
non-blank answer, in visible-question order.  validate_responses() builds
the form-level verdict on top of it, including knockout answers.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.core.constants import KNOCKOUT_ERROR_TEMPLATE, REQUIRED_ERROR_TEMPLATE
from app.core.logging import get_logger
from app.eligibility.models import (
    EligibilityQuestion,
    KnockoutAnswer,
    QuestionValidation,
    ResponseInput,
    is_answered,
    snapshot_responses,
)
from app.eligibility.resolver import resolve_visible

logger = get_logger(__name__)


def get_required_errors(
    visible_questions: Sequence[EligibilityQuestion],
    responses: ResponseInput,
) -> list[str]:
    """Return a required-error message for each unanswered visible question."""
    snapshot = snapshot_responses(responses)
    return [
        REQUIRED_ERROR_TEMPLATE.format(question_id=q.question_id)
        for q in visible_questions
        if not is_answered(snapshot, q.question_id)
    ]


def find_knockout_answers(
    visible_questions: Sequence[EligibilityQuestion],
    responses: ResponseInput,
) -> list[KnockoutAnswer]:
    """Return the visible questions answered with a disqualifying answer."""
    snapshot = snapshot_responses(responses)
    knockouts: list[KnockoutAnswer] = []

    for question in visible_questions:
        if not is_answered(snapshot, question.question_id):
            continue
        response = snapshot[question.question_id]
        selected = next((a for a in question.possible_answers if a.matches(response)), None)
        if selected is not None and selected.is_knockout:
            knockouts.append(KnockoutAnswer(
                question_id=question.question_id,
                answer_id=selected.id,
                message=selected.error_message
                or KNOCKOUT_ERROR_TEMPLATE.format(question_id=question.question_id),
            ))

    return knockouts


def validate_responses(
    questions: Sequence[EligibilityQuestion],
    responses: ResponseInput,
) -> QuestionValidation:
    """
    Validate a full question set.

    Verdict:
        - no questions at all           -> valid (nothing to answer)
        - questions but none visible    -> invalid (still loading, or every
                                           question hidden by its condition)
        - otherwise                     -> valid iff no required errors and
                                           no knockout answers

    errors lists the required errors first, then knockout messages.
    """
    snapshot = snapshot_responses(responses)
    visible = resolve_visible(questions, snapshot)
    required_errors = get_required_errors(visible, snapshot)
    knockouts = find_knockout_answers(visible, snapshot)

    if not questions:
        is_valid = True
    elif not visible:
        is_valid = False
    else:
        is_valid = not required_errors and not knockouts

    validation = QuestionValidation(
        is_valid=is_valid,
        errors=required_errors + [k.message for k in knockouts],
        knockout_answers=knockouts,
        visible_question_ids=[q.question_id for q in visible],
        remaining_count=len(required_errors),
    )

    logger.debug(
        "Question responses validated",
        total_questions=len(questions),
        visible_questions=len(visible),
        errors=len(validation.errors),
        knockouts=len(knockouts),
        is_valid=is_valid,
    )
    return validation
