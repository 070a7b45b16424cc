from .score import ScoreReporter, format_score

__all__ = ["ScoreReporter", "format_score"]
