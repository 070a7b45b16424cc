from __future__ import annotations

"""Quiz sessions: load questions, run the quiz and report the score."""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from ..console.input_reader import AnswerFeed, InputReader
from ..questions.loader import load_questions
from ..report.score import ScoreReporter
from ..runner.quiz_runner import DEFAULT_POLL_INTERVAL_S, FinalScore, QuizRunner
from .explain import trace as xtrace


def _run(
    csv_path: Union[str, Path],
    duration: Optional[float],
    stdin: Optional[TextIO],
    stdout: Optional[TextIO],
    poll_interval: float,
) -> FinalScore:
    # Load errors propagate before anything is shown.
    questions = load_questions(csv_path)
    xtrace("questions_loaded", {"path": str(csv_path), "count": len(questions)})
    out = stdout if stdout is not None else sys.stdout
    feed = AnswerFeed(InputReader(stdin))
    runner = QuizRunner(questions, duration, feed=feed, out=out, poll_interval=poll_interval)
    score = runner.run()
    ScoreReporter(out).report(score, timed=duration is not None)
    return score


def run_timed_quiz(
    csv_path: Union[str, Path],
    duration: float,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    poll_interval: float = DEFAULT_POLL_INTERVAL_S,
) -> FinalScore:
    """Run a quiz that stops after ``duration`` seconds or when all questions are answered."""
    return _run(csv_path, float(duration), stdin, stdout, poll_interval)


def run_untimed_quiz(
    csv_path: Union[str, Path],
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    poll_interval: float = DEFAULT_POLL_INTERVAL_S,
) -> FinalScore:
    """Run every question with no time limit."""
    return _run(csv_path, None, stdin, stdout, poll_interval)
