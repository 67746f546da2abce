"""
Scoring configuration — survey-derived baseline weights, behavioral deltas, and learning knobs.

ScoringConfig defaults are defined here. Callers may pass a dict
(e.g. loaded from SCORING_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class ScoringConfig(BaseModel):
    """Configuration for profile learning and affinity scoring."""

    # -------------------------------------------------------------------------
    # Initial Weights (baseline contribution per matching dimension, sum = 100)
    # -------------------------------------------------------------------------

    # Declared favorite spirit matches the item's base spirit.
    weight_favorite_spirit: float = 30.0
    # Flavor budget, split evenly across the user's flavor slots.
    weight_flavor_match: float = 25.0
    # Item difficulty vs stated skill level (partial credit one level away).
    weight_skill_match: float = 15.0
    # Item alcohol category equals stated alcohol preference. Binary.
    weight_alcohol_match: float = 15.0
    # Share of the item's required tools the user owns.
    weight_tools_match: float = 10.0
    # Item declares a mood tag.
    weight_mood_match: float = 5.0

    # Number of flavor selections the flavor budget is divided by.
    flavor_slots: int = Field(default=3, ge=1)

    # Learned affinity scales a baseline by 1 + score / amplification_divisor.
    amplification_divisor: float = Field(default=100.0, gt=0)

    # -------------------------------------------------------------------------
    # Behavioral Deltas (added to every tag score an interaction touches)
    # -------------------------------------------------------------------------

    delta_viewed: float = 2.0
    delta_liked: float = 10.0
    delta_completed: float = 15.0
    delta_skipped: float = -5.0
    # Mood picked directly in mood-based browsing (mood score only, no log record).
    delta_mood_selected: float = 1.0

    # -------------------------------------------------------------------------
    # Complexity Learning
    # complexity = complexity + complexity_step * (item_complexity - complexity), on completed only
    # -------------------------------------------------------------------------

    complexity_step: float = 0.1
    initial_complexity: float = Field(default=0.5, ge=0.0, le=1.0)

    # -------------------------------------------------------------------------
    # Search History / Engagement Level
    # -------------------------------------------------------------------------

    # Only the most recent N searched terms are kept.
    search_history_limit: int = Field(default=50, ge=1)
    # Max number of terms returned by trending_searches.
    trending_limit: int = Field(default=5, ge=1)
    # Engagement score (0-100) needed before behavioral ranking replaces cold start.
    min_engagement_score: float = Field(default=20.0, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def weights_sum_to_hundred(self):
        total = (
            self.weight_favorite_spirit
            + self.weight_flavor_match
            + self.weight_skill_match
            + self.weight_alcohol_match
            + self.weight_tools_match
            + self.weight_mood_match
        )
        if abs(total - 100.0) > 0.01:
            raise ValueError(f"Initial weights must sum to 100, got {total}")
        if not 0.0 < self.complexity_step <= 1.0:
            raise ValueError(f"complexity_step must be in (0, 1], got {self.complexity_step}")
        return self

    @property
    def interaction_deltas(self) -> Dict[str, float]:
        """Delta per interaction kind."""
        return {
            "viewed": self.delta_viewed,
            "liked": self.delta_liked,
            "completed": self.delta_completed,
            "skipped": self.delta_skipped,
        }

    @property
    def flavor_slot_weight(self) -> float:
        """Baseline per matching flavor (25 / 3 by default)."""
        return self.weight_flavor_match / self.flavor_slots

    def amplify(self, baseline: float, behavioral_score: float) -> float:
        """Scale a baseline by learned affinity: baseline * (1 + score / divisor)."""
        return baseline * (1.0 + behavioral_score / self.amplification_divisor)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "ScoringConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "initial_weights" in config_dict:
            for key, value in config_dict["initial_weights"].items():
                flat[f"weight_{key}"] = value
        if "interaction_deltas" in config_dict:
            for key, value in config_dict["interaction_deltas"].items():
                flat[f"delta_{key}"] = value
        if "learning" in config_dict:
            lr = config_dict["learning"]
            for key in ("complexity_step", "initial_complexity", "amplification_divisor", "flavor_slots"):
                if key in lr:
                    flat[key] = lr[key]
        if "search" in config_dict:
            sr = config_dict["search"]
            if "history_limit" in sr:
                flat["search_history_limit"] = sr["history_limit"]
            if "trending_limit" in sr:
                flat["trending_limit"] = sr["trending_limit"]
        if "min_engagement_score" in config_dict:
            flat["min_engagement_score"] = config_dict["min_engagement_score"]
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = ScoringConfig()


def resolve_config(config: Optional["ScoringConfig"]) -> "ScoringConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
