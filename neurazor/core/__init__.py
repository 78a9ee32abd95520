"""
Core Package - NeuRazor Scoring Engine
neurazor/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.
"""

from neurazor.core.exceptions import (
    ActiveVersionInvariantException,
    ComparisonException,
    ConfigKindMismatchException,
    NoActiveVersionException,
    NotFoundException,
    ScoringException,
    VersionNotFoundException,
)
from neurazor.core.logging import configure_logging

__all__ = [
    # Exceptions
    "ActiveVersionInvariantException",
    "ComparisonException",
    "ConfigKindMismatchException",
    "NoActiveVersionException",
    "NotFoundException",
    "ScoringException",
    "VersionNotFoundException",
    # Logging
    "configure_logging",
]
