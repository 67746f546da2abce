"""
Behavioral learning: update tag affinities from interactions and track search history.

Every tag on an interacted item moves by the delta for the interaction kind
(viewed +2, liked +10, completed +15, skipped -5 by default). Tag scores are
unbounded; the affinity scorer decides how much they matter. complexity_score
moves toward the item's complexity on completions only.

All functions return new values; inputs are never mutated. The caller owns
per-user ordering (one writer per user) and persistence of the returned profile.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..models.config import ScoringConfig, resolve_config
from ..models.interaction import EventTags, InteractionEvent, InteractionRecord
from ..models.profile import BehavioralScoreStore, InteractionLog, UserPreferenceProfile
from ..utils.scores import ema_step
from ..utils.tags import ensure_known_event_tags

logger = logging.getLogger(__name__)


def _bump(scores: Dict[str, float], tags: List[str], delta: float) -> Dict[str, float]:
    """Copy of scores with delta added once per distinct tag."""
    updated = dict(scores)
    for tag in dict.fromkeys(tags):
        updated[tag] = updated.get(tag, 0.0) + delta
    return updated


def apply_interaction(
    scores: BehavioralScoreStore,
    event: InteractionEvent,
    config: Optional[ScoringConfig] = None,
) -> BehavioralScoreStore:
    """
    Apply one interaction's deltas to a score store and return the new store.

    Tags are validated before anything changes: an unknown tag raises
    UnknownTagError and no score is touched.
    """
    config = resolve_config(config)
    ensure_known_event_tags(event.tags, event.item_id)

    delta = config.interaction_deltas[event.kind]
    spirits = [event.tags.spirit] if event.tags.spirit else []

    complexity = scores.complexity_score
    if event.kind == "completed" and event.complexity is not None:
        complexity = ema_step(complexity, event.complexity, config.complexity_step)

    return BehavioralScoreStore(
        spirit_scores=_bump(scores.spirit_scores, spirits, delta),
        flavor_scores=_bump(scores.flavor_scores, event.tags.flavor, delta),
        mood_scores=_bump(scores.mood_scores, event.tags.mood, delta),
        complexity_score=complexity,
    )


def record_interaction(
    profile: UserPreferenceProfile,
    event: InteractionEvent,
    config: Optional[ScoringConfig] = None,
    now: Optional[datetime] = None,
) -> UserPreferenceProfile:
    """
    Learn from one interaction and log it.

    The interaction is appended to the log whether or not any score changed.
    Replaying the same event applies it again; deduplication is the caller's job.

    Args:
        profile: Current profile (the per-user store handle).
        event: Interaction to apply.
        config: Scoring config (DEFAULT_CONFIG when None).
        now: Timestamp used when the event has none; injectable for tests.

    Returns:
        New profile with updated behavioral_scores and interactions.

    Raises:
        UnknownTagError: an event tag is outside the vocabulary. profile is unchanged.
    """
    scores = apply_interaction(profile.behavioral_scores, event, config)

    timestamp = event.timestamp or now or datetime.now(timezone.utc)
    log = profile.interactions
    record = InteractionRecord(recipe_id=event.item_id, kind=event.kind, timestamp=timestamp)
    interactions = log.model_copy(
        update={"records": [*log.records, record], "last_updated": timestamp}
    )

    logger.debug(
        "[learning] INTERACTION_RECORDED item_id=%s kind=%s complexity=%.3f records=%s",
        event.item_id, event.kind, scores.complexity_score, len(interactions.records),
    )
    return profile.model_copy(
        update={"behavioral_scores": scores, "interactions": interactions}
    )


def record_mood_selection(
    profile: UserPreferenceProfile,
    mood: str,
    config: Optional[ScoringConfig] = None,
    now: Optional[datetime] = None,
) -> UserPreferenceProfile:
    """
    Count a mood picked directly in mood-based browsing.

    Only mood_scores moves (by delta_mood_selected); no interaction record is
    written, so engagement_score is unaffected. Unknown moods raise UnknownTagError.
    """
    config = resolve_config(config)
    ensure_known_event_tags(EventTags(mood=[mood]))

    scores = profile.behavioral_scores.model_copy(
        update={
            "mood_scores": _bump(
                profile.behavioral_scores.mood_scores, [mood], config.delta_mood_selected
            )
        }
    )
    interactions = profile.interactions.model_copy(
        update={"last_updated": now or datetime.now(timezone.utc)}
    )
    logger.debug("[learning] MOOD_SELECTED mood=%s score=%.1f", mood, scores.mood(mood))
    return profile.model_copy(
        update={"behavioral_scores": scores, "interactions": interactions}
    )


def record_search(
    profile: UserPreferenceProfile,
    term: str,
    config: Optional[ScoringConfig] = None,
    now: Optional[datetime] = None,
) -> UserPreferenceProfile:
    """
    Append a search term (lower-cased, stripped) to the history.

    Blank terms are ignored. Only the last search_history_limit terms are kept.
    """
    config = resolve_config(config)
    normalized = (term or "").strip().lower()
    if not normalized:
        return profile

    log = profile.interactions
    terms = [*log.searched_terms, normalized][-config.search_history_limit:]
    interactions = log.model_copy(
        update={
            "searched_terms": terms,
            "last_updated": now or datetime.now(timezone.utc),
        }
    )
    return profile.model_copy(update={"interactions": interactions})


def trending_searches(
    profile: UserPreferenceProfile,
    limit: Optional[int] = None,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """Most frequent searched terms, most frequent first (ties keep first-seen order)."""
    config = resolve_config(config)
    limit = config.trending_limit if limit is None else limit
    # Counter.most_common keeps insertion order among equal counts.
    counts = Counter(profile.interactions.searched_terms)
    return [term for term, _ in counts.most_common(limit)]


def engagement_score(profile: UserPreferenceProfile) -> float:
    """
    How much behavioral data the user has produced (0-100).

    Views, likes, completions and searches each contribute up to a cap
    (20, 30, 40, 10); completions count most per event.
    """
    log = profile.interactions
    score = 0.0
    score += min(20.0, log.count("viewed") * 0.5)
    score += min(30.0, log.count("liked") * 2.0)
    score += min(40.0, log.count("completed") * 4.0)
    score += min(10.0, len(log.searched_terms) * 0.2)
    return min(100.0, score)


def has_enough_data(
    profile: UserPreferenceProfile,
    config: Optional[ScoringConfig] = None,
) -> bool:
    """True once engagement_score reaches min_engagement_score."""
    config = resolve_config(config)
    return engagement_score(profile) >= config.min_engagement_score


def reset_learning(
    profile: UserPreferenceProfile,
    config: Optional[ScoringConfig] = None,
) -> UserPreferenceProfile:
    """Explicit reset: drop learned scores and interaction history, keep survey answers."""
    config = resolve_config(config)
    logger.info(
        "[learning] LEARNING_RESET records_dropped=%s searches_dropped=%s",
        len(profile.interactions.records),
        len(profile.interactions.searched_terms),
    )
    return profile.model_copy(
        update={
            "behavioral_scores": BehavioralScoreStore(
                complexity_score=config.initial_complexity
            ),
            "interactions": InteractionLog(),
        }
    )
