from .schema import Question, QuestionSet, make_question_set
from .loader import load_questions

__all__ = [
    "Question",
    "QuestionSet",
    "make_question_set",
    "load_questions",
]
