"""Tests for required-answer errors, knockouts and the form-level verdict."""

import pytest

from app.eligibility.conditions import EqualsResponse
from app.eligibility.models import DynamicQuestionResponse, EligibilityQuestion, PossibleAnswer
from app.eligibility.resolver import resolve_visible
from app.eligibility.validator import find_knockout_answers, get_required_errors, validate_responses


@pytest.fixture
def knockout_question() -> EligibilityQuestion:
    return EligibilityQuestion(
        question_id=631,
        text="<p>Have you been hospitalized in the last <b>12 months</b>?</p>",
        possible_answers=(
            PossibleAnswer(id=2101, answer_text="Yes", is_knockout=True,
                           error_message="Applicants hospitalized in the last year are not eligible"),
            PossibleAnswer(id=2102, answer_text="No"),
        ),
    )


class TestGetRequiredErrors:
    def test_follow_up_required_after_yes(self, yes_no_questions):
        responses = {1: "yes"}
        visible = resolve_visible(yes_no_questions, responses)
        assert get_required_errors(visible, responses) == ["Question 2 is required"]

    def test_no_errors_after_no(self, yes_no_questions):
        responses = {1: "no"}
        visible = resolve_visible(yes_no_questions, responses)
        assert get_required_errors(visible, responses) == []

    def test_blank_response_counts_as_missing(self, yes_no_questions):
        responses = [DynamicQuestionResponse(question_id=1, response=" \t ")]
        assert get_required_errors(yes_no_questions, responses) == [
            "Question 1 is required",
            "Question 2 is required",
        ]

    def test_empty_input_yields_empty_output(self):
        assert get_required_errors([], {}) == []

    def test_idempotent_and_order_stable(self):
        questions = [EligibilityQuestion(question_id=i, text="") for i in (9, 3, 5)]
        first = get_required_errors(questions, {3: "x"})
        second = get_required_errors(questions, {3: "x"})
        assert first == second == ["Question 9 is required", "Question 5 is required"]

    @pytest.mark.parametrize(
        "responses",
        [{}, {1: "yes"}, {1: "no"}, {1: "yes", 2: "  "}, {1: "yes", 2: "3"}, {2: "3"}],
    )
    def test_error_count_matches_unanswered_visible(self, yes_no_questions, responses):
        visible = resolve_visible(yes_no_questions, responses)
        unanswered = [q for q in visible if not responses.get(q.question_id, "").strip()]
        assert len(get_required_errors(visible, responses)) == len(unanswered)


class TestKnockouts:
    def test_knockout_matched_by_answer_id(self, knockout_question):
        knockouts = find_knockout_answers([knockout_question], {631: "2101"})
        assert len(knockouts) == 1
        assert knockouts[0].answer_id == 2101
        assert knockouts[0].message == "Applicants hospitalized in the last year are not eligible"

    def test_knockout_matched_by_answer_text(self, knockout_question):
        assert len(find_knockout_answers([knockout_question], {631: "Yes"})) == 1

    def test_non_knockout_answer(self, knockout_question):
        assert find_knockout_answers([knockout_question], {631: "2102"}) == []

    def test_default_knockout_message(self):
        question = EligibilityQuestion(
            question_id=7,
            text="",
            possible_answers=(PossibleAnswer(id=1, answer_text="Yes", is_knockout=True),),
        )
        knockouts = find_knockout_answers([question], {7: "1"})
        assert knockouts[0].message == "Question 7 answer disqualifies applicant"


class TestValidateResponses:
    def test_no_questions_is_valid(self):
        validation = validate_responses([], {})
        assert validation.is_valid is True
        assert validation.errors == []

    def test_questions_but_none_visible_is_invalid(self):
        questions = [
            EligibilityQuestion(
                question_id=1,
                text="hidden",
                visibility_condition=EqualsResponse(question_id=0, expected_value="x"),
            ),
        ]
        validation = validate_responses(questions, {})
        assert validation.is_valid is False
        assert validation.visible_question_ids == []

    def test_all_answered_is_valid(self, yes_no_questions):
        validation = validate_responses(yes_no_questions, {1: "yes", 2: "5"})
        assert validation.is_valid is True
        assert validation.remaining_count == 0

    def test_missing_answer_is_invalid(self, yes_no_questions):
        validation = validate_responses(yes_no_questions, {1: "yes"})
        assert validation.is_valid is False
        assert validation.errors == ["Question 2 is required"]
        assert validation.visible_question_ids == [1, 2]
        assert validation.remaining_count == 1

    def test_knockout_makes_form_invalid(self, knockout_question):
        validation = validate_responses([knockout_question], {631: "2101"})
        assert validation.is_valid is False
        assert validation.has_knockout_answers
        assert validation.errors == ["Applicants hospitalized in the last year are not eligible"]

    def test_required_errors_listed_before_knockouts(self, knockout_question):
        questions = [knockout_question, EligibilityQuestion(question_id=700, text="Other")]
        validation = validate_responses(questions, {631: "2101"})
        assert validation.errors == [
            "Question 700 is required",
            "Applicants hospitalized in the last year are not eligible",
        ]
