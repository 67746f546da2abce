"""
Candidate item: a recipe or lesson from the catalog, as seen by the scorer.

Built from catalog dicts via CandidateItem.model_validate(d) or ensure_items().
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .vocabulary import AlcoholPreference, SkillLevel


class ItemTags(BaseModel):
    """Scoring-relevant tags of an item."""

    spirit: Optional[str] = None
    flavor: List[str] = Field(default_factory=list)
    mood: Optional[str] = None
    complexity: float = Field(default=0.5, ge=0.0, le=1.0)


class CandidateItem(BaseModel):
    """
    Catalog entry supplied by the item catalog collaborator.

    alcohol_category: None means unknown strength; it never earns the alcohol term.
    tools: bar tools the recipe requires.
    track: content track the item belongs to (used for cold-start seeding).
    """

    model_config = ConfigDict(extra="allow")

    id: str = ""
    title: Optional[str] = ""
    tags: ItemTags = Field(default_factory=ItemTags)
    difficulty: SkillLevel = "beginner"
    alcohol_category: Optional[AlcoholPreference] = None
    tools: List[str] = Field(default_factory=list)
    track: Optional[str] = None


def ensure_items(items: List[Union[Dict, "CandidateItem"]]) -> List["CandidateItem"]:
    """Convert list of dicts or CandidateItems to list of CandidateItem models."""
    return [
        CandidateItem.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
