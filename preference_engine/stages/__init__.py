"""Pipeline stages: survey schema, profile builder, behavioral learning, affinity scoring, track mapping, queue orchestration."""

from .affinity import score_item, score_item_breakdown
from .behavioral_learning import (
    apply_interaction,
    engagement_score,
    has_enough_data,
    record_interaction,
    record_mood_selection,
    record_search,
    reset_learning,
    trending_searches,
)
from .learning_tracks import map_goal_to_tracks
from .orchestrator import create_recommendation_queue, rank_items
from .profile_builder import build_profile
from .survey_schema import get_question, get_survey_questions, validate_answer, validate_answers

__all__ = [
    "apply_interaction",
    "build_profile",
    "create_recommendation_queue",
    "engagement_score",
    "get_question",
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
