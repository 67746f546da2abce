"""Shared utilities for scoring, learning, and tag validation."""

from .scores import clamp, ema_step, skill_distance
from .tags import ensure_known_event_tags, ensure_known_item_tags

__all__ = [
    "clamp",
    "ema_step",
    "skill_distance",
    "ensure_known_event_tags",
    "ensure_known_item_tags",
]
