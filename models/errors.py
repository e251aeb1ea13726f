"""Input validation errors.

All of these subclass ValueError so callers that already handle bad
input the usual way keep working.
"""


class InvalidRoster(ValueError):
    """A roster contains the same competitor id more than once."""

    def __init__(self, duplicate_ids: list[int]):
        self.duplicate_ids = duplicate_ids
        super().__init__(f"Duplicate competitor ids in roster: {duplicate_ids}")


class InvalidTrialCount(ValueError):
    """Trial count must be a positive integer."""

    def __init__(self, trials):
        self.trials = trials
        super().__init__(f"Trial count must be a positive integer, got {trials!r}")


class InvalidPopulation(ValueError):
    """Population or sample parameters cannot produce a roster."""


class ScoringStateError(RuntimeError):
    """A score record was moved through an illegal state transition."""
