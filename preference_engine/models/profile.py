"""
Profile model — the durable per-user preference profile.

UserPreferenceProfile is a frozen value: the survey-derived fields never change
after onboarding, and the learned parts (behavioral_scores, interactions) are
replaced wholesale by the behavioral learning stage, which returns a new profile.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .interaction import InteractionRecord
from .vocabulary import (
    FLAVOR_TAGS,
    MOOD_TAGS,
    SPIRIT_TAGS,
    AlcoholPreference,
    SessionTime,
    SkillLevel,
)

MAX_FLAVOR_PROFILES = 3

_SCORE_VOCABULARIES = {
    "spirit_scores": SPIRIT_TAGS,
    "flavor_scores": FLAVOR_TAGS,
    "mood_scores": MOOD_TAGS,
}


class BehavioralScoreStore(BaseModel):
    """
    Learned affinity per tag, one map per dimension, plus a complexity preference.

    Tag scores are unbounded (negative after repeated skips); missing tags score 0.
    complexity_score stays within [0, 1] (0 = simple, 1 = complex).
    """

    model_config = ConfigDict(frozen=True)

    spirit_scores: Dict[str, float] = Field(default_factory=dict)
    flavor_scores: Dict[str, float] = Field(default_factory=dict)
    mood_scores: Dict[str, float] = Field(default_factory=dict)
    complexity_score: float = Field(default=0.5, ge=0.0, le=1.0)

    @field_validator("spirit_scores", "flavor_scores", "mood_scores")
    @classmethod
    def keys_in_vocabulary(cls, v: Dict[str, float], info: ValidationInfo) -> Dict[str, float]:
        vocabulary = _SCORE_VOCABULARIES[info.field_name]
        unknown = sorted(k for k in v if k not in vocabulary)
        if unknown:
            raise ValueError(f"Unknown tags in {info.field_name}: {unknown}")
        return v

    def spirit(self, tag: Optional[str]) -> float:
        return self.spirit_scores.get(tag, 0.0) if tag else 0.0

    def flavor(self, tag: str) -> float:
        return self.flavor_scores.get(tag, 0.0)

    def mood(self, tag: Optional[str]) -> float:
        return self.mood_scores.get(tag, 0.0) if tag else 0.0


class InteractionLog(BaseModel):
    """Raw interaction history; records and searched_terms are ordered oldest first."""

    model_config = ConfigDict(frozen=True)

    records: List[InteractionRecord] = Field(default_factory=list)
    searched_terms: List[str] = Field(default_factory=list)
    last_updated: Optional[datetime] = None

    def count(self, kind: str) -> int:
        """Number of recorded interactions of one kind."""
        return sum(1 for r in self.records if r.kind == kind)

    def recipe_ids(self, kind: str) -> List[str]:
        """Recipe ids of one interaction kind, in record order."""
        return [r.recipe_id for r in self.records if r.kind == kind]


class UserPreferenceProfile(BaseModel):
    """Survey-derived preferences plus learned behavior for one user."""

    model_config = ConfigDict(frozen=True)

    favorite_spirit: Optional[str] = None
    spirit_preferences: List[str] = Field(default_factory=list)
    skill_level: SkillLevel
    alcohol_preference: AlcoholPreference
    flavor_profiles: List[str] = Field(default_factory=list)
    learning_goal: Optional[str] = None
    available_tools: List[str] = Field(default_factory=list)
    session_time: SessionTime = "standard"
    behavioral_scores: BehavioralScoreStore = Field(default_factory=BehavioralScoreStore)
    interactions: InteractionLog = Field(default_factory=InteractionLog)

    @field_validator("flavor_profiles")
    @classmethod
    def at_most_three_flavors(cls, v: List[str]) -> List[str]:
        if len(v) > MAX_FLAVOR_PROFILES:
            raise ValueError(
                f"At most {MAX_FLAVOR_PROFILES} flavor profiles allowed, got {len(v)}"
            )
        return v
