"""
All-or-nothing tag checks against the closed vocabularies.
"""

import logging
from typing import Iterable, Optional, Tuple

from ..errors import UnknownTagError
from ..models.interaction import EventTags
from ..models.item import CandidateItem
from ..models.vocabulary import is_known_tag

logger = logging.getLogger(__name__)


def _tagged(
    spirit: Optional[str], flavors: Iterable[str], moods: Iterable[str]
) -> Iterable[Tuple[str, str]]:
    if spirit:
        yield "spirit", spirit
    for f in flavors:
        yield "flavor", f
    for m in moods:
        yield "mood", m


def ensure_known_event_tags(tags: EventTags, item_id: Optional[str] = None) -> None:
    """Raise UnknownTagError on the first tag outside its vocabulary."""
    for dimension, tag in _tagged(tags.spirit, tags.flavor, tags.mood):
        if not is_known_tag(dimension, tag):
            logger.warning(
                "[tags] UNKNOWN_TAG_REJECTED dimension=%s tag=%s item_id=%s",
                dimension, tag, item_id,
            )
            raise UnknownTagError(dimension, tag, item_id)


def ensure_known_item_tags(item: CandidateItem) -> None:
    """Validate an item's spirit, flavor, mood, and tool tags."""
    moods = [item.tags.mood] if item.tags.mood else []
    pairs = list(_tagged(item.tags.spirit, item.tags.flavor, moods))
    pairs.extend(("tool", t) for t in item.tools)
    for dimension, tag in pairs:
        if not is_known_tag(dimension, tag):
            logger.warning(
                "[tags] UNKNOWN_TAG_REJECTED dimension=%s tag=%s item_id=%s",
                dimension, tag, item.id,
            )
            raise UnknownTagError(dimension, tag, item.id)
