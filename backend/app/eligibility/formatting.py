"""Turn internal validation errors into labels an applicant can read."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from app.eligibility.models import EligibilityQuestion, QuestionValidation

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")
_QUESTION_ID_RE = re.compile(r"Question\s+(\d+)\s+", re.IGNORECASE)

REQUIRED_FALLBACK_LABEL = "A required question has not been answered"
GENERIC_FALLBACK_LABEL = "One of the answers has an error"
INLINE_REQUIRED_MESSAGE = "This question is required."


@dataclass
class FriendlyValidationError:
    label: str
    question_id: int | None = None


def strip_html(html: str) -> str:
    """Drop tags and collapse whitespace; question texts arrive as simple HTML."""
    return _SPACE_RE.sub(" ", _TAG_RE.sub("", html)).strip()


def extract_question_id(error: str) -> int | None:
    """Pull the id out of messages like "Question 631 is required"."""
    match = _QUESTION_ID_RE.search(error)
    return int(match.group(1)) if match else None


def _is_required_error(error: str) -> bool:
    return "is required" in error.lower()


def to_friendly_validation_errors(
    errors: Sequence[str],
    questions: Sequence[EligibilityQuestion],
) -> list[FriendlyValidationError]:
    """Map each error to the question text it refers to, or a generic label."""
    by_id = {q.question_id: q for q in questions}
    friendly = []

    for error in errors:
        question_id = extract_question_id(error)
        question = by_id.get(question_id) if question_id is not None else None
        label = strip_html(question.text) if question is not None and question.text else ""

        if not label:
            if question_id is not None and _is_required_error(error):
                label = REQUIRED_FALLBACK_LABEL
            else:
                label = GENERIC_FALLBACK_LABEL

        friendly.append(FriendlyValidationError(label=label, question_id=question_id))

    return friendly


def inline_error_message(raw_error: str | None) -> str | None:
    """Short message shown next to a question card."""
    if not raw_error:
        return None
    if _is_required_error(raw_error):
        return INLINE_REQUIRED_MESSAGE
    return raw_error


def inline_errors_by_question(validation: QuestionValidation) -> dict[int, str]:
    """First inline message per question, for the question cards that show one."""
    inline: dict[int, str] = {}
    for error in validation.errors:
        question_id = extract_question_id(error)
        message = inline_error_message(error)
        if question_id is not None and message:
            inline.setdefault(question_id, message)
    for knockout in validation.knockout_answers:
        message = inline_error_message(knockout.message)
        if message:
            inline.setdefault(knockout.question_id, message)
    return inline
