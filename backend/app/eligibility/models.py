"""
Eligibility questionnaire domain types.

A question set is an ordered sequence of EligibilityQuestion with unique
question_id values.  Responses are keyed by question_id; at most one
response per question is considered (the first one supplied).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from app.core.constants import AnswerType, QuestionType
from app.eligibility.conditions import ALWAYS, Condition


@dataclass(frozen=True)
class PossibleAnswer:
    """A selectable answer for a question."""

    id: int
    answer_text: str
    answer_type: str = AnswerType.RADIO
    is_knockout: bool = False
    error_message: str | None = None

    def matches(self, response: str) -> bool:
        """True if a response selects this answer (by id or by text)."""
        value = response.strip()
        return value == str(self.id) or value == self.answer_text


@dataclass(frozen=True)
class EligibilityQuestion:
    """A dynamically returned question, possibly conditionally visible."""

    question_id: int
    text: str
    visibility_condition: Condition = ALWAYS
    question_type: str = QuestionType.ELIGIBILITY
    sequence_no: int = 0
    possible_answers: tuple[PossibleAnswer, ...] = ()


@dataclass(frozen=True)
class DynamicQuestionResponse:
    """The applicant's current answer to one question."""

    question_id: int
    response: str
    data_key: str | None = None


@dataclass
class KnockoutAnswer:
    """A visible question whose selected answer disqualifies the applicant."""

    question_id: int
    answer_id: int
    message: str


@dataclass
class QuestionValidation:
    """Form-level validation verdict for a question set."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    knockout_answers: list[KnockoutAnswer] = field(default_factory=list)
    visible_question_ids: list[int] = field(default_factory=list)
    remaining_count: int = 0

    @property
    def has_knockout_answers(self) -> bool:
        return bool(self.knockout_answers)


ResponseInput = Mapping[int, str] | Iterable[DynamicQuestionResponse]


def snapshot_responses(responses: ResponseInput) -> Mapping[int, str]:
    """
    Build an immutable question_id -> response mapping.

    Accepts either a mapping or a sequence of DynamicQuestionResponse.
    For sequences the first response per question wins; insertion order is kept.
    """
    if isinstance(responses, Mapping):
        return MappingProxyType(dict(responses))

    snapshot: dict[int, str] = {}
    for item in responses:
        snapshot.setdefault(item.question_id, item.response)
    return MappingProxyType(snapshot)


def is_answered(snapshot: Mapping[int, str], question_id: int) -> bool:
    """A question is answered iff it has a response that is not blank."""
    value = snapshot.get(question_id)
    return value is not None and bool(value.strip())
