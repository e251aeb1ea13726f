"""Bracket scoring.

Turns one elimination history into a placement and points for every
competitor, using the fixed battle royale scoring tables in config.
"""

import config
from models.competitor import Competitor, EliminationHistory, ScoreRecord


def points_for_placement(placement: int) -> int:
    """Points for a final placement (1 = champion)."""
    if placement < 1:
        return 0
    for bound, points in config.PLACEMENT_POINTS:
        if placement <= bound:
            return points
    return 0


def points_for_eliminations(eliminations: int) -> int:
    """Bonus points for the number of opponents a competitor knocked out."""
    for bound, points in config.ELIMINATION_POINTS:
        if eliminations >= bound:
            return points
    return 0


def score_history(history: EliminationHistory, roster_size: int,
                  roster: list[Competitor] | None = None) -> dict[int, tuple[Competitor, ScoreRecord]]:
    """Score a completed bracket.

    Losers are placed by when they fell: the last fight's loser is 2nd, the
    one before that 3rd, and the first fight's loser is last. A loser's points
    are frozen at that moment. The winner of the final fight is crowned after
    the walk, which is the only way anyone gets placement 1.

    Args:
        history: Fights in the order they happened
        roster_size: Number of competitors that entered the bracket
        roster: The entrants. Required for a one-competitor bracket, which
            has no fights to name the champion

    Raises:
        ValueError: roster_size is 1 but roster does not hold that entrant

    Returns:
        {competitor_id: (competitor, score_record)}
    """
    scores: dict[int, tuple[Competitor, ScoreRecord]] = {}

    def record_for(competitor: Competitor) -> ScoreRecord:
        if competitor.id not in scores:
            scores[competitor.id] = (competitor, ScoreRecord())
        return scores[competitor.id][1]

    fights = len(history)
    for index, outcome in enumerate(history):
        record_for(outcome.winner).record_elimination()

        loser = record_for(outcome.loser)
        placement = fights - index + 1
        points = points_for_placement(placement) + points_for_eliminations(loser.eliminations)
        loser.eliminate(placement, points)

    if history:
        champion = history[-1].winner
    elif roster_size == 1:
        if not roster or len(roster) != 1:
            raise ValueError("A one-competitor bracket has no fights, pass roster to crown its entrant")
        champion = roster[0]
    else:
        return scores

    record = record_for(champion)
    record.crown(points_for_placement(config.CHAMPION_PLACEMENT)
                 + points_for_eliminations(record.eliminations))
    return scores


def rank_scores(scores: dict[int, tuple[Competitor, ScoreRecord]]) -> list[tuple[Competitor, ScoreRecord]]:
    """Order scored competitors by points, highest first (ties keep insertion order)."""
    return sorted(scores.values(), key=lambda item: item[1].points, reverse=True)
