"""
Map a stated learning goal to ordered content tracks.

Used to seed recommendations before any behavioral data exists.
"""

from typing import Dict, List, Optional, Tuple

DEFAULT_TRACKS: Tuple[str, ...] = ("getting-started", "popular-cocktails", "flavor-exploration")

GOAL_TRACKS: Dict[str, Tuple[str, ...]] = {
    "host": ("crowd-pleasers", "batch-cocktails", "party-hosting"),
    "classics": ("classic-cocktails", "fundamentals", "spirit-education"),
    "creative": ("flavor-pairing", "recipe-creation", "advanced-techniques"),
    "professional": ("pro-techniques", "speed-accuracy", "menu-development"),
}


def map_goal_to_tracks(goal: Optional[str]) -> List[str]:
    """Tracks for a learning goal; unknown or missing goals (incl. 'explore') get the default set."""
    return list(GOAL_TRACKS.get(goal or "", DEFAULT_TRACKS))
