"""
MixMind Preference Scoring Engine

Single entry point for the engine package:
- models/: ScoringConfig, UserPreferenceProfile, InteractionEvent, CandidateItem, ScoredItem
- stages/: survey_schema, profile_builder, behavioral_learning, affinity, learning_tracks, orchestrator
- services/: profile stores (in-memory, JSON file)
"""

from .errors import (
    MissingAnswer,
    SurveyValidationError,
    TooManySelections,
    UnknownOption,
    UnknownTagError,
)
from .models import (
    DEFAULT_CONFIG,
    BehavioralScoreStore,
    CandidateItem,
    InteractionEvent,
    InteractionLog,
    ScoredItem,
    ScoringConfig,
    SurveyQuestion,
    UserPreferenceProfile,
)
from .stages import (
    apply_interaction,
    build_profile,
    create_recommendation_queue,
    engagement_score,
    get_survey_questions,
    has_enough_data,
    map_goal_to_tracks,
    rank_items,
    record_interaction,
    record_mood_selection,
    record_search,
    reset_learning,
    score_item,
    score_item_breakdown,
    trending_searches,
    validate_answer,
    validate_answers,
)

__all__ = [
    "DEFAULT_CONFIG",
    "BehavioralScoreStore",
    "CandidateItem",
    "InteractionEvent",
    "InteractionLog",
    "MissingAnswer",
    "ScoredItem",
    "ScoringConfig",
    "SurveyQuestion",
    "SurveyValidationError",
    "TooManySelections",
    "UnknownOption",
    "UnknownTagError",
    "UserPreferenceProfile",
    "apply_interaction",
    "build_profile",
    "create_recommendation_queue",
    "engagement_score",
    "get_survey_questions",
    "has_enough_data",
    "map_goal_to_tracks",
    "rank_items",
    "record_interaction",
    "record_mood_selection",
    "record_search",
    "reset_learning",
    "score_item",
    "score_item_breakdown",
    "trending_searches",
    "validate_answer",
    "validate_answers",
]
