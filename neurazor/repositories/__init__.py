"""
Repositories Package - NeuRazor Scoring Engine
neurazor/repositories/__init__.py

Persistence collaborator contract and the in-memory backend.
"""

from neurazor.repositories.base import BaseScoringRepository, ScoringPersistence
from neurazor.repositories.memory_repository import InMemoryScoringRepository

__all__ = [
    "BaseScoringRepository",
    "ScoringPersistence",
    "InMemoryScoringRepository",
]
