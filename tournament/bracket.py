"""Random-pairing elimination bracket.

Unlike a seeded tree bracket, every fight draws two survivors uniformly at
random from everyone still alive, so a winner can be drawn again right away.
The bracket ends when one competitor is left standing.
"""

import logging

import numpy as np

from models.competitor import CombatOutcome, Competitor, EliminationHistory
from tournament.combat import resolve_fight

logger = logging.getLogger(__name__)


def simulate_bracket(roster: list[Competitor], rng: np.random.Generator) -> EliminationHistory:
    """Run one bracket to completion.

    Args:
        roster: Competitors entered into the bracket (not modified)
        rng: Random number generator used for pairings and fights

    Returns:
        Every fight in the order it happened. Always len(roster) - 1 entries,
        or none for a roster of 0 or 1.
    """
    # Private working copy, the caller's roster is shared across trials
    alive = list(roster)
    history: list[CombatOutcome] = []

    while len(alive) > 1:
        first, second = rng.choice(len(alive), size=2, replace=False)
        a = alive[first]
        b = alive[second]
        # Pop the higher index first so the lower one stays valid
        for index in sorted((first, second), reverse=True):
            alive.pop(index)

        outcome = resolve_fight(a, b, rng)
        alive.append(outcome.winner)
        history.append(outcome)

    if history:
        logger.debug("Bracket of %d finished, champion %s", len(roster), history[-1].winner)
    return history
