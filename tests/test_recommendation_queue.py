"""
Recommendation Queue Tests

Tests ranking a catalog and cold-start seeding by learning track.

Scenario:
---------
Profile: gin / beginner / alcoholic / [citrus, herbal] / goal "classics"
Seed tracks for "classics": classic-cocktails, fundamentals, spirit-education

Expected scores (no behavior):
- gin-fizz              81.67  (fundamentals)
- negroni               65.83  (classic-cocktails)
- margarita             43.33  (popular-cocktails)
- virgin-mojito         36.67  (getting-started)
- smoked-old-fashioned  20.00  (no track)

Run:
----
    pytest tests/test_recommendation_queue.py -v
"""

import pytest

from preference_engine import (
    create_recommendation_queue,
    map_goal_to_tracks,
    rank_items,
    record_interaction,
)
from preference_engine.models import CandidateItem

from .conftest import FIXED_NOW

RANKED_IDS = ["gin-fizz", "negroni", "margarita", "virgin-mojito", "smoked-old-fashioned"]
COLD_START_IDS = ["negroni", "gin-fizz", "margarita", "virgin-mojito", "smoked-old-fashioned"]


def _warm(profile, make_event, completions=5):
    for _ in range(completions):
        profile = record_interaction(profile, make_event("completed"), now=FIXED_NOW)
    return profile


class TestLearningTracks:
    def test_classics(self):
        assert map_goal_to_tracks("classics") == ["classic-cocktails", "fundamentals", "spirit-education"]

    def test_unset_goal(self):
        assert map_goal_to_tracks(None) == ["getting-started", "popular-cocktails", "flavor-exploration"]

    @pytest.mark.parametrize(
        "goal,tracks",
        [
            ("host", ["crowd-pleasers", "batch-cocktails", "party-hosting"]),
            ("creative", ["flavor-pairing", "recipe-creation", "advanced-techniques"]),
            ("professional", ["pro-techniques", "speed-accuracy", "menu-development"]),
            ("explore", ["getting-started", "popular-cocktails", "flavor-exploration"]),
            ("tiki", ["getting-started", "popular-cocktails", "flavor-exploration"]),
        ],
    )
    def test_table(self, goal, tracks):
        assert map_goal_to_tracks(goal) == tracks

    def test_returns_fresh_list(self):
        tracks = map_goal_to_tracks("host")
        tracks.append("mutated")
        assert map_goal_to_tracks("host") == ["crowd-pleasers", "batch-cocktails", "party-hosting"]


class TestRankItems:
    def test_sorted_by_score(self, gin_profile, catalog):
        ranked = rank_items(gin_profile, catalog)
        assert [s.item.id for s in ranked] == RANKED_IDS
        scores = [s.final_score for s in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0].final_score == pytest.approx(30 + 50 / 3 + 15 + 15 + 5)

    def test_accepts_dicts(self, gin_profile, catalog):
        ranked = rank_items(gin_profile, [c.model_dump() for c in catalog])
        assert [s.item.id for s in ranked] == RANKED_IDS

    def test_unknown_tag_item_skipped(self, gin_profile, catalog):
        bad = CandidateItem(id="mezcal-mule", tags={"spirit": "mezcal"})
        ranked = rank_items(gin_profile, [*catalog, bad])
        assert "mezcal-mule" not in [s.item.id for s in ranked]
        assert len(ranked) == len(catalog)

    def test_empty_catalog(self, gin_profile):
        assert rank_items(gin_profile, []) == []


class TestRecommendationQueue:
    def test_cold_start_seeds_goal_tracks_first(self, gin_profile, catalog):
        queue, cold_start, seed_tracks = create_recommendation_queue(gin_profile, catalog)
        assert cold_start is True
        assert seed_tracks == ["classic-cocktails", "fundamentals", "spirit-education"]
        assert [s.item.id for s in queue] == COLD_START_IDS

    def test_cold_start_without_goal_uses_default_tracks(self, gin_profile, catalog):
        profile = gin_profile.model_copy(update={"learning_goal": None})
        queue, cold_start, seed_tracks = create_recommendation_queue(profile, catalog)
        assert cold_start is True
        assert seed_tracks[0] == "getting-started"
        assert [s.item.id for s in queue][:2] == ["virgin-mojito", "margarita"]

    def test_warm_profile_ranks_by_score(self, gin_profile, catalog, make_event):
        profile = _warm(gin_profile, make_event)
        queue, cold_start, seed_tracks = create_recommendation_queue(profile, catalog)
        assert cold_start is False
        assert seed_tracks == []
        assert [s.item.id for s in queue] == [s.item.id for s in rank_items(profile, catalog)]
        assert queue[0].item.id == "gin-fizz"

    def test_queue_contains_every_valid_item(self, gin_profile, catalog):
        queue, _, _ = create_recommendation_queue(gin_profile, catalog)
        assert sorted(s.item.id for s in queue) == sorted(c.id for c in catalog)
