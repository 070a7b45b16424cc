from __future__ import annotations

"""QuizRunner: presents questions, collects answers and stops on the deadline.

The run loop is the only writer of quiz progress. Progress never leaves the
loop; callers receive a frozen :class:`FinalScore` once the run is decided.
"""

import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, TextIO, Tuple

from ..app.explain import trace as xtrace
from ..console.input_reader import AnswerFeed, InputReader
from ..errors import InputClosed
from ..questions.schema import Question, QuestionSet
from ..timing.deadline import Deadline

DEFAULT_POLL_INTERVAL_S = 0.05


class Outcome(str, Enum):
    EXHAUSTED = "exhausted"
    EXPIRED = "expired"
    INPUT_CLOSED = "input_closed"


@dataclass(frozen=True)
class AnswerRecord:
    index: int
    given: str
    correct: bool


@dataclass(frozen=True)
class FinalScore:
    """Tally handed to the reporter when the run ends."""

    correct: int
    total: int
    outcome: Outcome = Outcome.EXHAUSTED
    answers: Tuple[AnswerRecord, ...] = ()


@dataclass
class QuizProgress:
    current_index: int = 0
    correct_count: int = 0
    question_presented: bool = False


class QuizRunner:
    """Single-use orchestrator for one timed quiz.

    Args:
        questions: The question set, read-only.
        duration: Seconds until the deadline; ``None`` for an untimed quiz.
        feed: Source of answer lines. Defaults to a feed over stdin.
        out: Stream the prompts are written to. Defaults to stdout.
        poll_interval: Upper bound on how long one wait for an answer may
            last before the deadline is checked again.
        clock: Monotonic clock used by the deadline.
    """

    def __init__(
        self,
        questions: QuestionSet,
        duration: Optional[float],
        feed: Optional[AnswerFeed] = None,
        out: Optional[TextIO] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self.questions = tuple(questions)
        self.duration = duration
        self.feed = feed if feed is not None else AnswerFeed(InputReader())
        self.out = out if out is not None else sys.stdout
        self.poll_interval = float(poll_interval)
        self._clock = clock
        self._started = False

    def _present(self, index: int, question: Question) -> None:
        self.out.write(f"{question.prompt} = ")
        self.out.flush()
        xtrace("question_presented", {"index": index})

    def run(self) -> FinalScore:
        if self._started:
            raise RuntimeError("QuizRunner instances are single-use")
        self._started = True

        total = len(self.questions)
        if total == 0:
            xtrace("quiz_finished", {"correct": 0, "total": 0, "outcome": Outcome.EXHAUSTED.value})
            return FinalScore(correct=0, total=0, outcome=Outcome.EXHAUSTED)

        progress = QuizProgress()
        answers: List[AnswerRecord] = []
        outcome = Outcome.EXHAUSTED
        deadline = Deadline.start(self.duration, self._clock)
        self.feed.start()
        try:
            while progress.current_index < total:
                # Expiry wins ties with an answer that is ready at the same time.
                if deadline.fired():
                    outcome = Outcome.EXPIRED
                    xtrace("deadline_expired", {"index": progress.current_index})
                    break

                question = self.questions[progress.current_index]
                if not progress.question_presented:
                    self._present(progress.current_index, question)
                    progress.question_presented = True

                wait_s = self.poll_interval
                remaining = deadline.remaining()
                if remaining is not None:
                    wait_s = min(wait_s, remaining)
                try:
                    line = self.feed.get(timeout=wait_s)
                except InputClosed:
                    outcome = Outcome.INPUT_CLOSED
                    xtrace("input_closed", {"index": progress.current_index})
                    break
                if line is None:
                    continue

                # A received line is scored before expiry is looked at again.
                is_correct = question.is_correct(line)
                if is_correct:
                    progress.correct_count += 1
                answers.append(AnswerRecord(index=progress.current_index, given=line, correct=is_correct))
                xtrace("answer_graded", {"index": progress.current_index, "correct": is_correct})
                progress.current_index += 1
                progress.question_presented = False
        finally:
            self.feed.stop()
            deadline.cancel()

        score = FinalScore(
            correct=progress.correct_count,
            total=total,
            outcome=outcome,
            answers=tuple(answers),
        )
        xtrace("quiz_finished", {"correct": score.correct, "total": score.total, "outcome": outcome.value})
        return score
