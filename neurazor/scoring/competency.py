"""
Competency Primitive
neurazor/scoring/competency.py

Formula:
    score          = max(0, min(100, raw_score))
    weighted_score = score × weight

Weights are not range checked: negative (penalty-style) or >1 weights pass
through unchanged.
"""

from neurazor.models.results import CompetencyScore


def make_competency(name: str, raw_score: float, weight: float) -> CompetencyScore:
    """Clamp a raw score into [0, 100] and attach its weight."""
    return CompetencyScore(name=name, score=raw_score, weight=weight)
