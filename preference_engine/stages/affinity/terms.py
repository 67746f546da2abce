"""
Per-dimension affinity terms.

Each term takes the profile, the item and the config and returns its
contribution to the final score. Baselines come from the initial weights;
learned scores amplify or dampen them via config.amplify().
"""

from ...models.config import ScoringConfig
from ...models.item import CandidateItem
from ...models.profile import UserPreferenceProfile
from ...models.vocabulary import SKILL_LEVELS
from ...utils.scores import skill_distance

MAX_SKILL_DISTANCE = len(SKILL_LEVELS) - 1


def spirit_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """
    Favorite spirit match: amplified 30-point baseline.
    No declared match: the raw learned spirit score (0 for items without a spirit).
    """
    spirit = item.tags.spirit
    learned = profile.behavioral_scores.spirit(spirit)
    if spirit and profile.favorite_spirit == spirit:
        return config.amplify(config.weight_favorite_spirit, learned)
    return learned


def flavor_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """Sum over flavors shared with the profile, each worth weight_flavor_match / flavor_slots."""
    selected = set(profile.flavor_profiles)
    shared = [f for f in dict.fromkeys(item.tags.flavor) if f in selected]
    return sum(
        config.amplify(config.flavor_slot_weight, profile.behavioral_scores.flavor(f))
        for f in shared
    )


def skill_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """
    Full credit on exact level, half credit one level away, nothing two levels away.

    Distance is normalized by the widest gap (beginner vs advanced), so the
    credit is weight * max(0, 1 - |d| / 2). An unnormalized 1 - |d| would give
    nothing one level away (see DESIGN.md, open question 2).
    """
    distance = skill_distance(item.difficulty, profile.skill_level) / MAX_SKILL_DISTANCE
    return config.weight_skill_match * max(0.0, 1.0 - distance)


def alcohol_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """Binary: strength mismatch is a hard signal, not a soft one."""
    if item.alcohol_category is not None and item.alcohol_category == profile.alcohol_preference:
        return config.weight_alcohol_match
    return 0.0


def tools_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """Share of the item's required tools the user has."""
    required = set(item.tools)
    owned = required & set(profile.available_tools)
    return config.weight_tools_match * len(owned) / max(1, len(required))


def mood_term(
    profile: UserPreferenceProfile, item: CandidateItem, config: ScoringConfig
) -> float:
    """Amplified mood baseline when the item declares a mood, else 0."""
    mood = item.tags.mood
    if not mood:
        return 0.0
    return config.amplify(config.weight_mood_match, profile.behavioral_scores.mood(mood))
