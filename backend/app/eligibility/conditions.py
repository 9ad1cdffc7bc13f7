"""
Visibility conditions — tagged variants evaluated against a response snapshot.

    Always()                              always visible
    Never()                               never visible
    EqualsResponse(qid, value)            response[qid] == value
    ResponseIn(qid, values)               response[qid] in values
    VisibilityRule(qid, values, hidden)   response[qid] in values; when qid is
                                          unanswered, visible unless hidden
    AnyOf(c1, c2, ...)                    at least one holds
    AllOf(c1, c2, ...)                    every one holds

Except for VisibilityRule, a reference to a question without a non-blank
response is "not satisfied".  The resolver only hands a condition the
responses of questions declared before it, so forward references and
references to unknown questions count as unanswered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass


class Condition(ABC):
    """Base class for every visibility condition."""

    @abstractmethod
    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        """Evaluate against a question_id -> response snapshot."""
        ...


def _answer(responses: Mapping[int, str], question_id: int) -> str | None:
    value = responses.get(question_id)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Always(Condition):
    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        return True


@dataclass(frozen=True)
class Never(Condition):
    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        return False


@dataclass(frozen=True)
class EqualsResponse(Condition):
    """Visible when the referenced question was answered with expected_value."""

    question_id: int
    expected_value: str

    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        answer = _answer(responses, self.question_id)
        return answer is not None and answer == self.expected_value.strip()


@dataclass(frozen=True)
class ResponseIn(Condition):
    """Visible when the referenced question's answer is one of values."""

    question_id: int
    values: tuple[str, ...]

    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        answer = _answer(responses, self.question_id)
        return answer is not None and answer in {v.strip() for v in self.values}


@dataclass(frozen=True)
class VisibilityRule(Condition):
    """
    Carrier visibility rule.

    Once the referenced question is answered, the answer must be one of
    values (no values means it never matches).  Before that, the rule holds
    unless it is default-hidden.
    """

    question_id: int
    values: tuple[str, ...] = ()
    default_hidden: bool = False

    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        answer = _answer(responses, self.question_id)
        if answer is None:
            return not self.default_hidden
        return answer in {v.strip() for v in self.values}


@dataclass(frozen=True)
class AnyOf(Condition):
    conditions: tuple[Condition, ...]

    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        return any(c.is_satisfied(responses) for c in self.conditions)


@dataclass(frozen=True)
class AllOf(Condition):
    conditions: tuple[Condition, ...]

    def is_satisfied(self, responses: Mapping[int, str]) -> bool:
        return all(c.is_satisfied(responses) for c in self.conditions)


ALWAYS = Always()
