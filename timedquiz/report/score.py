from __future__ import annotations

"""Final score formatting."""

import sys
from typing import Optional, TextIO

from ..runner.quiz_runner import FinalScore


def format_score(score: FinalScore, timed: bool = True) -> str:
    """Return the score line; timed runs start on a fresh line after the prompt."""
    line = f"Score: {score.correct}/{score.total}\n"
    return "\n\n" + line if timed else line


class ScoreReporter:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout

    def report(self, score: FinalScore, timed: bool = True) -> None:
        self.out.write(format_score(score, timed))
        self.out.flush()
