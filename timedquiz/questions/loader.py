from __future__ import annotations

"""CSV loader for question/answer pairs.

Each row must hold exactly two fields, ``question,answer``. There is no
header row. Fields are kept verbatim so answers compare exactly.
"""

import csv
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from ..errors import MalformedRecord, SourceUnreadable
from .schema import Question, QuestionSet


def load_questions(source: Union[str, Path]) -> QuestionSet:
    """Load all questions from ``source``.

    Args:
        source: Path to the CSV file.

    Returns:
        The ordered, immutable question set.

    Raises:
        SourceUnreadable: the file cannot be opened or decoded.
        MalformedRecord: a row does not have exactly two fields.
    """
    path = Path(source)
    questions: List[Question] = []
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, strict=True)
            try:
                for row in reader:
                    if not row:
                        continue
                    if len(row) != 2:
                        raise MalformedRecord(
                            str(path), reader.line_num, f"expected 2 fields, saw {len(row)}"
                        )
                    try:
                        questions.append(Question(prompt=row[0], expected_answer=row[1]))
                    except ValidationError as e:
                        raise MalformedRecord(str(path), reader.line_num, str(e)) from e
            except csv.Error as e:
                raise MalformedRecord(str(path), reader.line_num, str(e)) from e
    except UnicodeDecodeError as e:
        raise SourceUnreadable(str(path), "not valid UTF-8 text") from e
    except OSError as e:
        raise SourceUnreadable(str(path), e.strerror or str(e)) from e
    return tuple(questions)
