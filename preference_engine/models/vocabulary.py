"""
Closed tag vocabularies — the only spirit, flavor, mood, and tool tags the engine accepts.

Behavioral scores and candidate items are validated against these sets;
anything else is rejected with UnknownTagError rather than stored.
"""

from typing import Dict, FrozenSet, List, Literal

SPIRIT_TAGS: FrozenSet[str] = frozenset(
    {"tequila", "whiskey", "rum", "gin", "vodka", "brandy", "liqueurs"}
)

FLAVOR_TAGS: FrozenSet[str] = frozenset(
    {"citrus", "sweet", "herbal", "bitter", "smoky", "spiced", "floral"}
)

MOOD_TAGS: FrozenSet[str] = frozenset(
    {
        "refreshing",
        "cozy",
        "playful",
        "sophisticated",
        "energizing",
        "romantic",
        "adventurous",
        "relaxing",
    }
)

TOOL_TAGS: FrozenSet[str] = frozenset(
    {"shaker", "jigger", "barspoon", "strainer", "muddler"}
)

# Survey option meaning "no preference" / "nothing yet"; never stored as a tag.
NONE_SENTINEL = "none"

SkillLevel = Literal["beginner", "intermediate", "advanced"]
AlcoholPreference = Literal["alcoholic", "low-abv", "zero-proof"]
SessionTime = Literal["quick", "standard", "extended"]

# Ordinal position used for partial skill credit.
SKILL_LEVELS: List[str] = ["beginner", "intermediate", "advanced"]

VOCABULARIES: Dict[str, FrozenSet[str]] = {
    "spirit": SPIRIT_TAGS,
    "flavor": FLAVOR_TAGS,
    "mood": MOOD_TAGS,
    "tool": TOOL_TAGS,
}


def is_known_tag(dimension: str, tag: str) -> bool:
    """True if tag belongs to the vocabulary for dimension."""
    return tag in VOCABULARIES.get(dimension, frozenset())


def skill_position(level: str) -> int:
    """Ordinal index of a skill level (beginner=0 … advanced=2)."""
    return SKILL_LEVELS.index(level)
