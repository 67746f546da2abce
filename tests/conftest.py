"""
Shared fixtures: survey answers, profiles, and a small cocktail catalog.
"""

from datetime import datetime, timezone

import pytest

from preference_engine import build_profile
from preference_engine.models import CandidateItem, InteractionEvent

FIXED_NOW = datetime(2026, 1, 15, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def gin_answers():
    """Classics-minded beginner who likes gin, citrus and herbal drinks."""
    return {
        "favorite_spirit": "gin",
        "skill_level": "beginner",
        "alcohol_preference": "alcoholic",
        "flavor_preferences": ["citrus", "herbal"],
        "learning_goal": "classics",
    }


@pytest.fixture
def gin_profile(gin_answers):
    return build_profile(gin_answers)


@pytest.fixture
def gin_sour():
    return CandidateItem(
        id="gin-sour",
        title="Gin Sour",
        tags={"spirit": "gin", "flavor": ["citrus"], "complexity": 0.3},
        difficulty="beginner",
        alcohol_category="alcoholic",
    )


@pytest.fixture
def catalog():
    """Small catalog spanning spirits, difficulty, strength and tracks."""
    return [
        CandidateItem(
            id="negroni",
            tags={"spirit": "gin", "flavor": ["bitter", "herbal"], "mood": "sophisticated", "complexity": 0.6},
            difficulty="intermediate",
            alcohol_category="alcoholic",
            tools=["barspoon", "jigger"],
            track="classic-cocktails",
        ),
        CandidateItem(
            id="margarita",
            tags={"spirit": "tequila", "flavor": ["citrus"], "mood": "playful", "complexity": 0.4},
            difficulty="beginner",
            alcohol_category="alcoholic",
            tools=["shaker", "jigger", "strainer"],
            track="popular-cocktails",
        ),
        CandidateItem(
            id="gin-fizz",
            tags={"spirit": "gin", "flavor": ["citrus", "herbal"], "mood": "refreshing", "complexity": 0.3},
            difficulty="beginner",
            alcohol_category="alcoholic",
            tools=["shaker"],
            track="fundamentals",
        ),
        CandidateItem(
            id="virgin-mojito",
            tags={"flavor": ["citrus", "herbal"], "mood": "refreshing", "complexity": 0.2},
            difficulty="beginner",
            alcohol_category="zero-proof",
            tools=["muddler"],
            track="getting-started",
        ),
        CandidateItem(
            id="smoked-old-fashioned",
            tags={"spirit": "whiskey", "flavor": ["smoky", "bitter"], "mood": "adventurous", "complexity": 0.9},
            difficulty="advanced",
            alcohol_category="alcoholic",
            tools=["barspoon"],
        ),
    ]


@pytest.fixture
def make_event():
    """Factory for InteractionEvent with gin/citrus/refreshing tags by default."""

    def _make(kind="viewed", item_id="gin-fizz", spirit="gin", flavor=None, mood=None, complexity=None):
        return InteractionEvent(
            item_id=item_id,
            kind=kind,
            tags={
                "spirit": spirit,
                "flavor": ["citrus"] if flavor is None else flavor,
                "mood": ["refreshing"] if mood is None else mood,
            },
            complexity=complexity,
        )

    return _make
