from __future__ import annotations

import io
import os
from typing import Tuple

from timedquiz.questions.schema import QuestionSet, make_question_set

ARITHMETIC = [("2+2", "4"), ("3+3", "6")]


def arithmetic_set() -> QuestionSet:
    return make_question_set(ARITHMETIC)


def silent_stdin() -> Tuple[io.TextIOWrapper, int]:
    """A stdin whose reads block until the returned write fd is closed."""
    r, w = os.pipe()
    return os.fdopen(r, "r", encoding="utf-8"), w


def write_csv(path: str, text: str) -> str:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path
