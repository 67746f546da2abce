"""
Affinity scoring for one candidate: weighted sum of independent match signals.

final = spirit + flavor + skill + alcohol + tools + mood. Not normalized;
scores are for ranking candidates against each other and may be negative
after repeated skips.
"""

import logging
from typing import Optional

from ...models.config import ScoringConfig, resolve_config
from ...models.item import CandidateItem
from ...models.profile import UserPreferenceProfile
from ...models.scoring import ScoredItem
from ...utils.tags import ensure_known_item_tags
from .terms import alcohol_term, flavor_term, mood_term, skill_term, spirit_term, tools_term

logger = logging.getLogger(__name__)


def score_item_breakdown(
    profile: UserPreferenceProfile,
    item: CandidateItem,
    config: Optional[ScoringConfig] = None,
) -> ScoredItem:
    """
    Score one item and keep every term.

    Raises:
        UnknownTagError: the item carries a tag outside the vocabulary.
    """
    config = resolve_config(config)
    ensure_known_item_tags(item)

    spirit = spirit_term(profile, item, config)
    flavor = flavor_term(profile, item, config)
    skill = skill_term(profile, item, config)
    alcohol = alcohol_term(profile, item, config)
    tools = tools_term(profile, item, config)
    mood = mood_term(profile, item, config)

    return ScoredItem(
        item=item,
        spirit_term=spirit,
        flavor_term=flavor,
        skill_term=skill,
        alcohol_term=alcohol,
        tools_term=tools,
        mood_term=mood,
        final_score=spirit + flavor + skill + alcohol + tools + mood,
    )


def score_item(
    profile: UserPreferenceProfile,
    item: CandidateItem,
    config: Optional[ScoringConfig] = None,
) -> float:
    """Affinity score of one item for this profile."""
    return score_item_breakdown(profile, item, config).final_score
