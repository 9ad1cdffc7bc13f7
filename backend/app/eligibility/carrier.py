"""
Carrier Question Adapter — application-bundle payloads to domain questions.

Carrier bundles describe visibility two ways, sometimes both at once::

    "condition": {"questionId": 630, "answerId": 2101}
    "questionVisibilityRules": [
        {"questionId": 630, "values": [2101, 2102], "isDefaultHidden": true}
    ]

condition becomes EqualsResponse.  Every rule must hold, so each one becomes
a VisibilityRule and several are combined with AllOf: an answered question
must match one of the rule's values, an unanswered one passes unless the
rule is default-hidden.  When both forms are present the question needs both.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from app.core.constants import AnswerType, QuestionType
from app.eligibility.conditions import ALWAYS, AllOf, Condition, EqualsResponse, VisibilityRule
from app.eligibility.models import EligibilityQuestion, PossibleAnswer


def answer_from_carrier(payload: dict[str, Any]) -> PossibleAnswer:
    """Build a PossibleAnswer; the knockout flag arrives with either casing."""
    return PossibleAnswer(
        id=int(payload["id"]),
        answer_text=str(payload.get("answerText") or ""),
        answer_type=payload.get("answerType") or AnswerType.RADIO,
        is_knockout=bool(payload.get("isKnockOut") or payload.get("isKnockout")),
        error_message=payload.get("errorMessage") or None,
    )


def rule_from_carrier(rule: dict[str, Any]) -> VisibilityRule:
    if not isinstance(rule, dict):
        raise TypeError(f"Visibility rule must be an object, got {type(rule).__name__}")
    return VisibilityRule(
        question_id=int(rule["questionId"]),
        values=tuple(str(v) for v in rule.get("values") or ()),
        default_hidden=bool(rule.get("isDefaultHidden")),
    )


def condition_from_carrier(payload: dict[str, Any]) -> Condition:
    """Build the visibility condition for one carrier question payload."""
    parts: list[Condition] = []

    condition = payload.get("condition")
    if condition:
        if not isinstance(condition, dict):
            raise TypeError(f"Condition must be an object, got {type(condition).__name__}")
        parts.append(EqualsResponse(
            question_id=int(condition["questionId"]),
            expected_value=str(condition["answerId"]),
        ))

    parts.extend(rule_from_carrier(rule) for rule in payload.get("questionVisibilityRules") or [])

    if not parts:
        return ALWAYS
    if len(parts) == 1:
        return parts[0]
    return AllOf(tuple(parts))


def question_from_carrier(payload: dict[str, Any]) -> EligibilityQuestion:
    """Convert one carrier eligibility question into an EligibilityQuestion."""
    return EligibilityQuestion(
        question_id=int(payload["questionId"]),
        text=str(payload.get("questionText") or ""),
        visibility_condition=condition_from_carrier(payload),
        question_type=payload.get("questionType") or QuestionType.ELIGIBILITY,
        sequence_no=int(payload.get("sequenceNo") or 0),
        possible_answers=tuple(
            answer_from_carrier(answer) for answer in payload.get("possibleAnswers") or []
        ),
    )


def questions_from_carrier(payloads: Iterable[dict[str, Any]]) -> list[EligibilityQuestion]:
    """Convert a carrier question list, ordered by sequenceNo (stable)."""
    questions = [question_from_carrier(p) for p in payloads]
    return sorted(questions, key=lambda q: q.sequence_no)
