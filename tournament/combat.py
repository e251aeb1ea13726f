"""Single fight resolution."""

import numpy as np

from models.competitor import CombatOutcome, Competitor
from models.probability import elo_win_probability


def resolve_fight(a: Competitor, b: Competitor, rng: np.random.Generator) -> CombatOutcome:
    """Resolve one fight between two competitors.

    Consumes exactly one uniform draw from rng. A wins when the draw is at or
    below A's Elo win probability.
    """
    p_a_wins = elo_win_probability(a.rating, b.rating)
    if rng.random() <= p_a_wins:
        return CombatOutcome(winner=a, loser=b)
    return CombatOutcome(winner=b, loser=a)
