class ScoringError(ValueError):
    """Base for inputs outside the scoring engine's domain."""


class InvalidHoleRankError(ScoringError):
    """Hole difficulty rank outside 1..hole_count."""


class HoleNotFoundError(ScoringError):
    """Hole number not present on the match card."""
