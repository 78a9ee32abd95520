"""
Custom Exceptions - NeuRazor Scoring Engine
neurazor/core/exceptions.py

Exception classes raised by the scoring configuration and version layers.
Failures raised by persistence or judging collaborators are not wrapped here;
they reach the caller unmodified.
"""


class ScoringException(Exception):
    """Base exception for scoring engine operations."""

    pass


class NotFoundException(ScoringException):
    """A requested scoring record does not exist."""

    pass


class VersionNotFoundException(NotFoundException):
    """Scoring version name unknown for a game kind."""

    def __init__(self, game_kind: str, version_name: str):
        self.game_kind = game_kind
        self.version_name = version_name
        super().__init__(f"Scoring version {version_name} not found for {game_kind}")


class NoActiveVersionException(NotFoundException):
    """No scoring version has ever been saved for a game kind."""

    def __init__(self, game_kind: str):
        self.game_kind = game_kind
        super().__init__(f"No active scoring version for {game_kind}")


class ActiveVersionInvariantException(ScoringException):
    """Zero or several active versions reported for a game kind."""

    def __init__(self, game_kind: str, active_count: int):
        self.game_kind = game_kind
        self.active_count = active_count
        super().__init__(
            f"Expected exactly one active scoring version for {game_kind}, "
            f"found {active_count}"
        )


class ConfigKindMismatchException(ScoringException):
    """A configuration was supplied for the wrong game kind."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected a {expected} configuration, got {actual}")


class ComparisonException(ScoringException):
    """Session comparison cannot be performed with the given selection."""

    def __init__(self, message: str = "At least 2 sessions are required to compare"):
        self.message = message
        super().__init__(message)
