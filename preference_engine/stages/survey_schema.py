"""
Survey schema — the fixed 7-question onboarding survey and answer validation.

Gets what recommendations need up front; everything else is learned from behavior.
Validation errors are returned, not raised, so the caller can re-prompt.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..errors import MissingAnswer, SurveyValidationError, TooManySelections, UnknownOption
from ..models.config import DEFAULT_CONFIG
from ..models.survey import SurveyOption, SurveyQuestion

logger = logging.getLogger(__name__)

_SPIRIT_HINT = DEFAULT_CONFIG.weight_favorite_spirit
_FLAVOR_HINT = DEFAULT_CONFIG.flavor_slot_weight


def _opt(value: str, label: str, weight_hint: Optional[float] = None) -> SurveyOption:
    return SurveyOption(value=value, label=label, weight_hint=weight_hint)


_QUESTIONS: Tuple[SurveyQuestion, ...] = (
    # Q1: drives the 30-point favorite spirit weight
    SurveyQuestion(
        id="favorite_spirit",
        section="Getting Started",
        type="single-choice",
        prompt="What's your favorite spirit?",
        subtitle="We'll recommend cocktails featuring this",
        options=[
            _opt("tequila", "Tequila", _SPIRIT_HINT),
            _opt("whiskey", "Whiskey", _SPIRIT_HINT),
            _opt("rum", "Rum", _SPIRIT_HINT),
            _opt("gin", "Gin", _SPIRIT_HINT),
            _opt("vodka", "Vodka", _SPIRIT_HINT),
            _opt("none", "None / No preference"),
        ],
    ),
    SurveyQuestion(
        id="skill_level",
        section="Your Experience",
        type="single-choice",
        prompt="How would you describe your bartending experience?",
        subtitle="Be honest - we'll match you with the right recipes",
        options=[
            _opt("beginner", "Beginner"),
            _opt("intermediate", "Intermediate"),
            _opt("advanced", "Advanced"),
        ],
    ),
    SurveyQuestion(
        id="alcohol_preference",
        section="Your Preferences",
        type="single-choice",
        prompt="What's your alcohol preference?",
        options=[
            _opt("alcoholic", "Full-strength cocktails"),
            _opt("low-abv", "Low-alcohol drinks"),
            _opt("zero-proof", "Alcohol-free only"),
        ],
    ),
    # Q4: drives the 25-point flavor budget, split across up to 3 picks
    SurveyQuestion(
        id="flavor_preferences",
        section="Your Tastes",
        type="multi-choice",
        prompt="Pick your top 3 flavor profiles",
        subtitle="Select up to 3",
        max_selections=3,
        options=[
            _opt("citrus", "Citrus & Fresh", _FLAVOR_HINT),
            _opt("sweet", "Sweet & Fruity", _FLAVOR_HINT),
            _opt("herbal", "Herbal & Green", _FLAVOR_HINT),
            _opt("bitter", "Bitter & Complex", _FLAVOR_HINT),
            _opt("smoky", "Smoky & Bold", _FLAVOR_HINT),
            _opt("spiced", "Spiced & Warm", _FLAVOR_HINT),
            _opt("floral", "Floral & Light", _FLAVOR_HINT),
        ],
    ),
    SurveyQuestion(
        id="learning_goal",
        section="Your Goals",
        type="single-choice",
        prompt="What do you want to achieve?",
        options=[
            _opt("host", "Impress guests at home"),
            _opt("classics", "Master the classics"),
            _opt("creative", "Create my own drinks"),
            _opt("professional", "Learn professional bartending"),
            _opt("explore", "Just exploring for fun"),
        ],
    ),
    SurveyQuestion(
        id="available_tools",
        section="Your Setup",
        type="multi-choice",
        prompt="What bar tools do you have?",
        subtitle="Select all that apply (or skip)",
        optional=True,
        options=[
            _opt("shaker", "Shaker"),
            _opt("jigger", "Jigger (measuring tool)"),
            _opt("barspoon", "Bar spoon"),
            _opt("strainer", "Strainer"),
            _opt("muddler", "Muddler"),
            _opt("none", "None yet"),
        ],
    ),
    SurveyQuestion(
        id="session_time",
        section="Final Question",
        type="single-choice",
        prompt="How much time do you typically have?",
        subtitle="We'll suggest recipes that fit your schedule",
        optional=True,
        options=[
            _opt("quick", "3-5 minutes (quick drinks)"),
            _opt("standard", "5-10 minutes (most recipes)"),
            _opt("extended", "10+ minutes (elaborate cocktails)"),
        ],
    ),
)

_BY_ID: Dict[str, SurveyQuestion] = {q.id: q for q in _QUESTIONS}


def get_survey_questions() -> List[SurveyQuestion]:
    """The onboarding questions, in display order."""
    return list(_QUESTIONS)


def get_question(question_id: str) -> SurveyQuestion:
    """Look up one question by id. Raises KeyError for unknown ids."""
    return _BY_ID[question_id]


def _is_unanswered(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple, set)) and not value)


def validate_answer(question: SurveyQuestion, value: Any) -> Optional[SurveyValidationError]:
    """
    Check one answer against its question.

    Returns None when the answer is acceptable (including an optional question
    left unanswered), otherwise the validation error describing the problem.
    """
    if _is_unanswered(value):
        return None if question.optional else MissingAnswer(question.id)

    if question.is_multi_choice:
        selected = [value] if isinstance(value, str) else list(value)
    elif isinstance(value, str):
        selected = [value]
    else:
        # A list submitted to a single-choice question is never a valid option.
        return UnknownOption(question.id, value, value)

    allowed = set(question.option_values)
    for v in selected:
        if v not in allowed:
            return UnknownOption(question.id, v, value)

    if question.max_selections is not None and len(selected) > question.max_selections:
        return TooManySelections(question.id, len(selected), question.max_selections, value)

    return None


def validate_answers(answers: Dict[str, Any]) -> Tuple[bool, List[SurveyValidationError]]:
    """
    Validate a full answer mapping against every question.

    Returns:
        (is_valid, errors)
    """
    errors: List[SurveyValidationError] = []
    for question in _QUESTIONS:
        error = validate_answer(question, answers.get(question.id))
        if error is not None:
            errors.append(error)

    unknown_ids = set(answers) - set(_BY_ID)
    if unknown_ids:
        logger.info("[survey] UNKNOWN_QUESTION_IDS_IGNORED ids=%s", sorted(unknown_ids))

    return len(errors) == 0, errors
