"""Win probability calculations."""

import config


def elo_win_probability(rating_a: float, rating_b: float) -> float:
    """Compute P(A beats B) from Elo ratings.

    Same value as T(a) / (T(a) + T(b)) with T(x) = 10 ** (x / 400), written
    in difference form so huge rating gaps never overflow.

    Args:
        rating_a: Competitor A's Elo rating
        rating_b: Competitor B's Elo rating

    Returns:
        Probability that A beats B
    """
    gap = (rating_b - rating_a) / config.ELO_SCALE
    if gap > 0:
        odds = 10.0 ** -gap
        return odds / (1.0 + odds)
    return 1.0 / (1.0 + 10.0 ** gap)
