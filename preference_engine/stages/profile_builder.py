"""
Profile builder: turn completed onboarding answers into the initial preference profile.

Pure: no storage reads or writes and no wall-clock reads. Callers persist the result.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..models.config import ScoringConfig, resolve_config
from ..models.profile import BehavioralScoreStore, InteractionLog, UserPreferenceProfile
from ..models.vocabulary import NONE_SENTINEL

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return list(value)


def build_profile(
    answers: Mapping[str, Any],
    config: Optional[ScoringConfig] = None,
) -> UserPreferenceProfile:
    """
    Build a UserPreferenceProfile from survey answers keyed by question id.

    Answers are expected to have passed validate_answers(); required enum fields
    that are missing or invalid fail pydantic validation here.
    """
    config = resolve_config(config)

    spirit = answers.get("favorite_spirit") or None
    if spirit == NONE_SENTINEL:
        spirit = None

    tools = [t for t in _as_list(answers.get("available_tools")) if t != NONE_SENTINEL]

    profile = UserPreferenceProfile(
        favorite_spirit=spirit,
        spirit_preferences=[spirit] if spirit else [],
        skill_level=answers.get("skill_level"),
        alcohol_preference=answers.get("alcohol_preference"),
        flavor_profiles=_as_list(answers.get("flavor_preferences")),
        learning_goal=answers.get("learning_goal") or None,
        available_tools=tools,
        session_time=answers.get("session_time") or "standard",
        behavioral_scores=BehavioralScoreStore(complexity_score=config.initial_complexity),
        interactions=InteractionLog(),
    )
    logger.debug(
        "[profile] PROFILE_BUILT favorite_spirit=%s skill=%s flavors=%s goal=%s",
        profile.favorite_spirit,
        profile.skill_level,
        profile.flavor_profiles,
        profile.learning_goal,
    )
    return profile
