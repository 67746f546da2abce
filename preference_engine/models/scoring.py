"""Scoring model — ScoredItem, an item with its per-dimension affinity terms."""

from pydantic import BaseModel

from .item import CandidateItem


class ScoredItem(BaseModel):
    """A candidate item with all its scoring components."""

    item: CandidateItem
    spirit_term: float
    flavor_term: float
    skill_term: float
    alcohol_term: float
    tools_term: float
    mood_term: float
    final_score: float
