"""
Small score helpers shared by learning and scoring.
"""

from ..models.vocabulary import skill_position


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def ema_step(current: float, target: float, step: float) -> float:
    """
    Move current a fixed fraction of the distance toward target, clamped to [0, 1].
    step=0.1 means ten completions at the same target close ~65% of the gap.
    """
    return clamp(current + step * (target - current))


def skill_distance(a: str, b: str) -> int:
    """Ordinal distance between two skill levels (0, 1 or 2)."""
    return abs(skill_position(a) - skill_position(b))
