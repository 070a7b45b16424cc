from __future__ import annotations

"""Question model and the read-only question set."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Question(BaseModel):
    """A single prompt and the exact answer expected for it."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    expected_answer: str

    @field_validator("prompt", "expected_answer", mode="before")
    @classmethod
    def _must_be_text(cls, v):
        if not isinstance(v, str):
            raise ValueError("fields must be text")
        return v

    def is_correct(self, answer: str) -> bool:
        return answer == self.expected_answer


QuestionSet = Tuple[Question, ...]


def make_question_set(pairs) -> QuestionSet:
    """Build a QuestionSet from an iterable of (prompt, answer) pairs."""
    return tuple(Question(prompt=q, expected_answer=a) for q, a in pairs)
