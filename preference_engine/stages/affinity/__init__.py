"""
Affinity scoring: survey baselines amplified by learned behavior.

Public API: score_item, score_item_breakdown.
- core: sums the terms into a ScoredItem.
- terms: one function per dimension (spirit, flavor, skill, alcohol, tools, mood).
"""

from .core import score_item, score_item_breakdown

__all__ = [
    "score_item",
    "score_item_breakdown",
]
