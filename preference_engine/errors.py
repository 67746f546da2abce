"""
Engine error taxonomy.

SurveyValidationError subclasses are *returned* by the survey validators so the
caller can re-prompt; UnknownTagError is *raised* by the learning and scoring
stages and rejects only the offending event or item.
"""

from typing import Any, Optional


class SurveyValidationError(ValueError):
    """An answer does not satisfy its question's constraints."""

    code = "invalid_answer"

    def __init__(self, question_id: str, message: str, value: Any = None):
        super().__init__(message)
        self.question_id = question_id
        self.value = value


class TooManySelections(SurveyValidationError):
    code = "too_many_selections"

    def __init__(self, question_id: str, selected: int, max_selections: int, value: Any = None):
        super().__init__(
            question_id,
            f"{question_id}: {selected} selections, at most {max_selections} allowed",
            value,
        )
        self.selected = selected
        self.max_selections = max_selections


class UnknownOption(SurveyValidationError):
    code = "unknown_option"

    def __init__(self, question_id: str, option: Any, value: Any = None):
        super().__init__(question_id, f"{question_id}: unknown option {option!r}", value)
        self.option = option


class MissingAnswer(SurveyValidationError):
    code = "missing_answer"

    def __init__(self, question_id: str):
        super().__init__(question_id, f"{question_id}: an answer is required")


class UnknownTagError(ValueError):
    """A tag outside the closed vocabulary for its dimension."""

    def __init__(self, dimension: str, tag: str, item_id: Optional[str] = None):
        where = f" (item {item_id})" if item_id else ""
        super().__init__(f"Unknown {dimension} tag {tag!r}{where}")
        self.dimension = dimension
        self.tag = tag
        self.item_id = item_id
