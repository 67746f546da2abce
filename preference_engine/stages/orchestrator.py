"""
Queue orchestrator — score a catalog for one profile and order it.

The main entry point is create_recommendation_queue, which scores every
candidate and returns the queue plus session metadata (cold_start, seed_tracks).
Before the user has produced enough behavioral data, items on the learning
tracks for their stated goal are placed first.
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from ..errors import UnknownTagError
from ..models.config import ScoringConfig, resolve_config
from ..models.item import CandidateItem, ensure_items
from ..models.profile import UserPreferenceProfile
from ..models.scoring import ScoredItem
from .affinity import score_item_breakdown
from .behavioral_learning import has_enough_data
from .learning_tracks import map_goal_to_tracks

logger = logging.getLogger(__name__)


def rank_items(
    profile: UserPreferenceProfile,
    items: List[Union[Dict, CandidateItem]],
    config: Optional[ScoringConfig] = None,
) -> List[ScoredItem]:
    """
    Score and sort candidates by final_score (desc, stable for ties).

    Items with unknown tags are rejected individually and left out of the result.
    """
    config = resolve_config(config)
    scored: List[ScoredItem] = []
    rejected = 0
    for item in ensure_items(items):
        try:
            scored.append(score_item_breakdown(profile, item, config))
        except UnknownTagError as exc:
            rejected += 1
            logger.warning(
                "[ranking] ITEM_REJECTED item_id=%s dimension=%s tag=%s",
                item.id, exc.dimension, exc.tag,
            )
    if rejected:
        logger.info("[ranking] ITEMS_REJECTED rejected=%s total=%s", rejected, len(items))

    scored.sort(key=lambda s: s.final_score, reverse=True)
    return scored


def _seed_by_tracks(scored: List[ScoredItem], seed_tracks: List[str]) -> List[ScoredItem]:
    """
    Put items on a seed track first, ordered by track position then score;
    everything else follows in score order.
    """
    position = {track: i for i, track in enumerate(seed_tracks)}
    seeded = [s for s in scored if s.item.track in position]
    rest = [s for s in scored if s.item.track not in position]
    # scored is already score-ordered; a stable sort on track keeps that within a track.
    seeded.sort(key=lambda s: position[s.item.track])
    return seeded + rest


def create_recommendation_queue(
    profile: UserPreferenceProfile,
    items: List[Union[Dict, CandidateItem]],
    config: Optional[ScoringConfig] = None,
) -> Tuple[List[ScoredItem], bool, List[str]]:
    """
    Create a ranked recommendation queue for one user.

    Returns:
        queue: List of ScoredItem
        cold_start: True if the user has not produced enough behavioral data yet
        seed_tracks: Learning tracks used for seeding (empty when not cold start)
    """
    config = resolve_config(config)
    scored = rank_items(profile, items, config)

    cold_start = not has_enough_data(profile, config)
    if not cold_start:
        return scored, False, []

    seed_tracks = map_goal_to_tracks(profile.learning_goal)
    logger.debug(
        "[ranking] COLD_START goal=%s seed_tracks=%s candidates=%s",
        profile.learning_goal, seed_tracks, len(scored),
    )
    return _seed_by_tracks(scored, seed_tracks), True, seed_tracks
