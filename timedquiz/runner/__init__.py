from .quiz_runner import (
    DEFAULT_POLL_INTERVAL_S,
    AnswerRecord,
    FinalScore,
    Outcome,
    QuizProgress,
    QuizRunner,
)

__all__ = [
    "DEFAULT_POLL_INTERVAL_S",
    "AnswerRecord",
    "FinalScore",
    "Outcome",
    "QuizProgress",
    "QuizRunner",
]
