"""
Interaction model — a user event on a recipe or lesson (view, like, complete, skip).

Consumed by the behavioral learning stage. Built from event-stream dicts via
InteractionEvent.model_validate(d) or ensure_events().
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

InteractionKind = Literal["viewed", "completed", "liked", "skipped"]


class EventTags(BaseModel):
    """Tags of the interacted item, per learned dimension."""

    spirit: Optional[str] = None
    flavor: List[str] = Field(default_factory=list)
    mood: List[str] = Field(default_factory=list)


class InteractionEvent(BaseModel):
    """
    A single interaction produced by the UI.

    item_id: recipe or lesson id; logged as recipe_id.
    complexity: the item's complexity (0-1); only used on completed.
    timestamp: when the interaction happened; filled at record time if missing.
    """

    model_config = ConfigDict(extra="allow")

    item_id: str
    kind: InteractionKind
    tags: EventTags = Field(default_factory=EventTags)
    complexity: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    timestamp: Optional[datetime] = None


class InteractionRecord(BaseModel):
    """Append-only log entry for one recorded interaction."""

    recipe_id: str
    kind: InteractionKind
    timestamp: datetime


def ensure_events(
    items: List[Union[Dict, "InteractionEvent"]],
) -> List["InteractionEvent"]:
    """Convert list of dicts or InteractionEvents to list of InteractionEvent models."""
    return [
        InteractionEvent.model_validate(e) if isinstance(e, dict) else e
        for e in items
    ]
