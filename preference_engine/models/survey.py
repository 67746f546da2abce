"""
Onboarding survey questions and their options.

Questions are immutable and defined once by the survey schema stage.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

QuestionType = Literal["single-choice", "multi-choice"]

# question id -> single value (single-choice) or list of values (multi-choice)
SurveyAnswers = Dict[str, Union[str, List[str], None]]


class SurveyOption(BaseModel):
    """One selectable option; value is what gets stored, label what gets shown."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    weight_hint: Optional[float] = None


class SurveyQuestion(BaseModel):
    """A single onboarding question."""

    model_config = ConfigDict(frozen=True)

    id: str
    section: str
    type: QuestionType
    prompt: str
    subtitle: Optional[str] = None
    options: List[SurveyOption]
    optional: bool = False
    max_selections: Optional[int] = None

    @property
    def option_values(self) -> List[str]:
        return [o.value for o in self.options]

    @property
    def is_multi_choice(self) -> bool:
        return self.type == "multi-choice"
