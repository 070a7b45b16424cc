from __future__ import annotations

"""Error taxonomy for the quiz.

Loader and config errors are fatal before the run starts. ``InputClosed`` is
raised mid-run and is turned into a normal termination by the runner.
"""


class QuizError(Exception):
    """Base class for all quiz errors."""


class SourceUnreadable(QuizError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read question file '{path}': {reason}")
        self.path = path
        self.reason = reason


class MalformedRecord(QuizError):
    def __init__(self, path: str, line: int, detail: str) -> None:
        super().__init__(f"Malformed record in '{path}' at line {line}: {detail}")
        self.path = path
        self.line = line
        self.detail = detail


class InputClosed(QuizError):
    """The answer stream reached end of input."""


class ConfigError(QuizError):
    pass
