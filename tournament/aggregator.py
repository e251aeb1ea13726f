"""Monte Carlo trial aggregation.

Runs the same roster through many independent brackets and estimates the
expected points of one tracked competitor. Each trial yields its own result
and the estimate is a reduction over those results, so trials share nothing
but the read-only roster.
"""

import logging
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

import config
from models.competitor import Competitor, validate_roster
from models.errors import InvalidTrialCount
from tournament.bracket import simulate_bracket
from tournament.scorer import score_history

logger = logging.getLogger(__name__)


@dataclass
class TrialResult:
    points: int
    placement: int  # 0 when the target was not in the bracket
    eliminations: int


@dataclass
class TrialSummary:
    trials: int
    mean: float
    std: float
    stderr: float
    min_points: int
    max_points: int
    champion_rate: float
    mean_placement: float
    mean_eliminations: float


def run_trial(roster: list[Competitor], target_id: int, rng: np.random.Generator) -> TrialResult:
    """Simulate and score a single bracket, returning the target's result."""
    history = simulate_bracket(roster, rng)
    scores = score_history(history, len(roster), roster)
    entry = scores.get(target_id)
    if entry is None:
        return TrialResult(points=0, placement=0, eliminations=0)
    _, record = entry
    return TrialResult(points=record.points, placement=record.placement,
                       eliminations=record.eliminations)


def run_trials(roster: list[Competitor], target_id: int, trials: int = config.DEFAULT_TRIALS,
               rng: np.random.Generator | None = None, seed: int | None = None,
               show_progress: bool = False) -> list[TrialResult]:
    """Run many independent trials over a fixed roster.

    Args:
        roster: Competitors entered into every bracket
        target_id: Competitor whose results are collected
        trials: Number of brackets to simulate
        rng: Random number generator (created from seed when omitted)
        seed: Random seed for reproducibility
        show_progress: Show progress bar

    Returns:
        One TrialResult per trial, in trial order
    """
    validate_roster(roster)
    if isinstance(trials, bool) or not isinstance(trials, (int, np.integer)) or trials <= 0:
        raise InvalidTrialCount(trials)
    if rng is None:
        rng = np.random.default_rng(seed)

    if not any(c.id == target_id for c in roster):
        logger.warning("Target %s is not in the roster, every trial scores 0", target_id)

    roster = list(roster)
    iterator = range(trials)
    if show_progress:
        iterator = tqdm(iterator, desc="Simulating brackets")

    logger.info("Running %d trials over %d competitors", trials, len(roster))
    return [run_trial(roster, target_id, rng) for _ in iterator]


def expected_points(roster: list[Competitor], target_id: int, trials: int = config.DEFAULT_TRIALS,
                    rng: np.random.Generator | None = None, seed: int | None = None,
                    show_progress: bool = False) -> float:
    """Average points for target_id across trials."""
    results = run_trials(roster, target_id, trials, rng=rng, seed=seed, show_progress=show_progress)
    return float(np.mean([r.points for r in results]))


def summarize_trials(results: list[TrialResult]) -> TrialSummary:
    """Reduce per-trial results into summary statistics."""
    if not results:
        raise InvalidTrialCount(0)

    points = np.array([r.points for r in results], dtype=float)
    placements = np.array([r.placement for r in results])
    eliminations = np.array([r.eliminations for r in results], dtype=float)
    n = len(results)

    std = float(points.std(ddof=1)) if n > 1 else 0.0
    placed = placements[placements > 0]
    return TrialSummary(
        trials=n,
        mean=float(points.mean()),
        std=std,
        stderr=float(std / np.sqrt(n)),
        min_points=int(points.min()),
        max_points=int(points.max()),
        champion_rate=float(np.mean(placements == config.CHAMPION_PLACEMENT)),
        mean_placement=float(placed.mean()) if placed.size else 0.0,
        mean_eliminations=float(eliminations.mean()),
    )
