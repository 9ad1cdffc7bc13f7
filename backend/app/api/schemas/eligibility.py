"""Eligibility questionnaire request/response schemas."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, model_validator

from app.api.schemas.address import CamelModel
from app.core.constants import AnswerType, QuestionType
from app.eligibility.conditions import (
    ALWAYS,
    AllOf,
    AnyOf,
    Condition,
    EqualsResponse,
    Never,
    ResponseIn,
)
from app.eligibility.formatting import FriendlyValidationError
from app.eligibility.models import (
    DynamicQuestionResponse,
    EligibilityQuestion,
    KnockoutAnswer,
    PossibleAnswer,
)


# ═══════════════════════════════════════════════════════════
#  Visibility conditions (tagged by "kind")
# ═══════════════════════════════════════════════════════════

class AlwaysSchema(CamelModel):
    kind: Literal["always"] = "always"

    def to_condition(self) -> Condition:
        return ALWAYS


class NeverSchema(CamelModel):
    kind: Literal["never"] = "never"

    def to_condition(self) -> Condition:
        return Never()


class EqualsResponseSchema(CamelModel):
    kind: Literal["equals_response"] = "equals_response"
    question_id: int
    expected_value: str

    def to_condition(self) -> Condition:
        return EqualsResponse(question_id=self.question_id, expected_value=self.expected_value)


class ResponseInSchema(CamelModel):
    kind: Literal["response_in"] = "response_in"
    question_id: int
    values: list[str] = Field(..., min_length=1)

    def to_condition(self) -> Condition:
        return ResponseIn(question_id=self.question_id, values=tuple(self.values))


class AnyOfSchema(CamelModel):
    kind: Literal["any_of"] = "any_of"
    conditions: list[ConditionSchema]

    def to_condition(self) -> Condition:
        return AnyOf(tuple(c.to_condition() for c in self.conditions))


class AllOfSchema(CamelModel):
    kind: Literal["all_of"] = "all_of"
    conditions: list[ConditionSchema]

    def to_condition(self) -> Condition:
        return AllOf(tuple(c.to_condition() for c in self.conditions))


ConditionSchema = Annotated[
    Union[
        AlwaysSchema,
        NeverSchema,
        EqualsResponseSchema,
        ResponseInSchema,
        AnyOfSchema,
        AllOfSchema,
    ],
    Field(discriminator="kind"),
]

AnyOfSchema.model_rebuild()
AllOfSchema.model_rebuild()


# ═══════════════════════════════════════════════════════════
#  Questions and responses
# ═══════════════════════════════════════════════════════════

class PossibleAnswerSchema(CamelModel):
    id: int
    answer_text: str = ""
    answer_type: str = AnswerType.RADIO
    is_knockout: bool = False
    error_message: str | None = None

    def to_domain(self) -> PossibleAnswer:
        return PossibleAnswer(
            id=self.id,
            answer_text=self.answer_text,
            answer_type=self.answer_type,
            is_knockout=self.is_knockout,
            error_message=self.error_message,
        )


class QuestionSchema(CamelModel):
    question_id: int
    text: str = ""
    visibility_condition: ConditionSchema | None = None
    question_type: str = QuestionType.ELIGIBILITY
    sequence_no: int = 0
    possible_answers: list[PossibleAnswerSchema] = Field(default_factory=list)

    def to_domain(self) -> EligibilityQuestion:
        condition = self.visibility_condition.to_condition() if self.visibility_condition else ALWAYS
        return EligibilityQuestion(
            question_id=self.question_id,
            text=self.text,
            visibility_condition=condition,
            question_type=self.question_type,
            sequence_no=self.sequence_no,
            possible_answers=tuple(a.to_domain() for a in self.possible_answers),
        )


class ResponseSchema(CamelModel):
    question_id: int
    response: str = ""
    data_key: str | None = None

    def to_domain(self) -> DynamicQuestionResponse:
        return DynamicQuestionResponse(
            question_id=self.question_id,
            response=self.response,
            data_key=self.data_key,
        )

    @classmethod
    def from_domain(cls, response: DynamicQuestionResponse) -> ResponseSchema:
        return cls(
            question_id=response.question_id,
            response=response.response,
            data_key=response.data_key,
        )


class QuestionnaireRequest(CamelModel):
    """
    A question set plus the applicant's in-progress responses.

    Questions come either in domain form (questions) or as the raw carrier
    application-bundle list (carrier_questions), not both.
    """

    questions: list[QuestionSchema] = Field(default_factory=list)
    carrier_questions: list[dict[str, Any]] = Field(default_factory=list)
    responses: list[ResponseSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_question_source(self) -> QuestionnaireRequest:
        if self.questions and self.carrier_questions:
            raise ValueError("Provide either questions or carrierQuestions, not both")
        return self

    @model_validator(mode="after")
    def _unique_question_ids(self) -> QuestionnaireRequest:
        ids = [q.question_id for q in self.questions]
        if len(ids) != len(set(ids)):
            raise ValueError("questionId values must be unique within a question set")
        return self

    def domain_responses(self) -> list[DynamicQuestionResponse]:
        return [r.to_domain() for r in self.responses]


# ═══════════════════════════════════════════════════════════
#  Results
# ═══════════════════════════════════════════════════════════

class VisibleQuestionsResponse(CamelModel):
    visible_question_ids: list[int]
    total_questions: int


class KnockoutAnswerSchema(CamelModel):
    question_id: int
    answer_id: int
    message: str

    @classmethod
    def from_domain(cls, knockout: KnockoutAnswer) -> KnockoutAnswerSchema:
        return cls(
            question_id=knockout.question_id,
            answer_id=knockout.answer_id,
            message=knockout.message,
        )


class FriendlyErrorSchema(CamelModel):
    label: str
    question_id: int | None = None

    @classmethod
    def from_domain(cls, error: FriendlyValidationError) -> FriendlyErrorSchema:
        return cls(label=error.label, question_id=error.question_id)


class QuestionValidationResponse(CamelModel):
    is_valid: bool
    errors: list[str]
    knockout_answers: list[KnockoutAnswerSchema]
    has_knockout_answers: bool
    visible_question_ids: list[int]
    remaining_count: int
    friendly_errors: list[FriendlyErrorSchema]
    inline_errors: dict[int, str] = {}


class PrunedResponsesResponse(CamelModel):
    responses: list[ResponseSchema]
    removed_count: int
