"""Test doubles and builders shared by the test modules."""

from models.competitor import CombatOutcome, Competitor


class FixedRandom:
    """Stand-in for numpy's Generator that returns preset uniform draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


def fight(winner_id, loser_id):
    """Build an outcome from ids alone; ratings don't matter to scoring."""
    return CombatOutcome(winner=Competitor(winner_id, 1200.0), loser=Competitor(loser_id, 1200.0))
