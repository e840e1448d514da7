"""
Profile System - Additive, Transparent Design.

Turns watch history into an interest profile and scores items against it.
No hidden interactions, no normalization, easy to debug.
"""

from app.services.profile.builder import ProfileBuilder
from app.services.profile.evidence import EvidenceCalculator
from app.services.profile.scorer import ProfileScorer

__all__ = [
    "ProfileBuilder",
    "ProfileScorer",
    "EvidenceCalculator",
]
