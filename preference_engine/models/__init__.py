"""Data models for the preference scoring engine."""

from .config import DEFAULT_CONFIG, ScoringConfig, resolve_config
from .interaction import EventTags, InteractionEvent, InteractionRecord, ensure_events
from .item import CandidateItem, ItemTags, ensure_items
from .profile import BehavioralScoreStore, InteractionLog, UserPreferenceProfile
from .scoring import ScoredItem
from .survey import SurveyAnswers, SurveyOption, SurveyQuestion

__all__ = [
    "DEFAULT_CONFIG",
    "BehavioralScoreStore",
    "CandidateItem",
    "EventTags",
    "InteractionEvent",
    "InteractionLog",
    "InteractionRecord",
    "ItemTags",
    "ScoredItem",
    "ScoringConfig",
    "SurveyAnswers",
    "SurveyOption",
    "SurveyQuestion",
    "UserPreferenceProfile",
    "ensure_events",
    "ensure_items",
    "resolve_config",
]
