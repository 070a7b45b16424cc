from .input_reader import AnswerFeed, InputReader

__all__ = ["AnswerFeed", "InputReader"]
