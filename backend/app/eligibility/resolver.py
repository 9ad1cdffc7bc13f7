"""
Visibility resolution for eligibility questions.

Pure functions of (questions, responses): nothing is cached between calls,
so the visible subset always reflects the full response snapshot passed in.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from app.core.logging import get_logger
from app.eligibility.models import (
    DynamicQuestionResponse,
    EligibilityQuestion,
    ResponseInput,
    snapshot_responses,
)

logger = get_logger(__name__)


def resolve_visible(
    questions: Sequence[EligibilityQuestion],
    responses: ResponseInput,
) -> list[EligibilityQuestion]:
    """
    Return the currently visible questions, in input order.

    Each condition is evaluated against the responses of questions declared
    before it in the sequence.  References to later, unknown or unanswered
    questions therefore evaluate as "not satisfied" and hide the question.
    """
    snapshot = snapshot_responses(responses)
    declared: dict[int, str] = {}
    visible: list[EligibilityQuestion] = []

    for question in questions:
        if question.visibility_condition.is_satisfied(MappingProxyType(declared)):
            visible.append(question)
        declared.setdefault(question.question_id, snapshot.get(question.question_id, ""))

    return visible


def visible_question_ids(
    questions: Sequence[EligibilityQuestion],
    responses: ResponseInput,
) -> list[int]:
    """Ids of the visible questions, in input order."""
    return [q.question_id for q in resolve_visible(questions, responses)]


def prune_hidden_responses(
    questions: Sequence[EligibilityQuestion],
    responses: Sequence[DynamicQuestionResponse],
) -> list[DynamicQuestionResponse]:
    """
    Drop responses for questions that are not currently visible.

    Responses for unknown question ids are dropped as well.  Removing an
    answer can hide questions that depended on it, so pruning repeats until
    the visible set is stable.  Order of the kept responses is preserved.
    """
    kept = list(responses)
    while True:
        visible_ids = set(visible_question_ids(questions, kept))
        next_kept = [r for r in kept if r.question_id in visible_ids]
        if len(next_kept) == len(kept):
            break
        kept = next_kept

    if len(kept) != len(responses):
        logger.debug(
            "Pruned responses for hidden questions",
            original_responses=len(responses),
            kept_responses=len(kept),
            removed_responses=len(responses) - len(kept),
        )
    return kept
