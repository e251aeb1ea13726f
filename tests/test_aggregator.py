import numpy as np
import pytest

from models.competitor import Competitor
from models.errors import InvalidRoster, InvalidTrialCount
from models.probability import elo_win_probability
from tournament.aggregator import (
    TrialResult,
    expected_points,
    run_trial,
    run_trials,
    summarize_trials,
)


class TestRunTrials:
    def test_one_result_per_trial(self, roster_of, rng):
        results = run_trials(roster_of(6), target_id=3, trials=25, rng=rng)
        assert len(results) == 25
        assert all(1 <= r.placement <= 6 for r in results)

    def test_missing_target_scores_zero(self, roster_of, rng):
        results = run_trials(roster_of(4), target_id=999, trials=10, rng=rng)
        assert [r.points for r in results] == [0] * 10
        assert [r.placement for r in results] == [0] * 10

    @pytest.mark.parametrize("trials", [0, -5])
    def test_non_positive_trials_rejected(self, roster_of, trials):
        with pytest.raises(InvalidTrialCount):
            run_trials(roster_of(4), target_id=1, trials=trials)

    @pytest.mark.parametrize("trials", [10.0, "10"])
    def test_non_integer_trials_rejected(self, roster_of, trials):
        with pytest.raises(InvalidTrialCount, match="positive integer"):
            run_trials(roster_of(4), target_id=1, trials=trials)

    def test_duplicate_ids_rejected_before_simulating(self):
        roster = [Competitor(1, 1200.0), Competitor(1, 1300.0)]
        with pytest.raises(InvalidRoster):
            run_trials(roster, target_id=1, trials=10)

    def test_roster_is_not_mutated(self, roster_of, rng):
        roster = roster_of(8)
        snapshot = list(roster)
        run_trials(roster, target_id=1, trials=20, rng=rng)
        assert roster == snapshot

    def test_seed_makes_runs_repeatable(self, roster_of):
        roster = roster_of(10)
        first = run_trials(roster, target_id=5, trials=50, seed=2024)
        second = run_trials(roster, target_id=5, trials=50, seed=2024)
        assert first == second

    def test_run_trial_reports_target_record(self, favourite, underdog, rng):
        result = run_trial([favourite, underdog], favourite.id, rng)
        assert (result.placement, result.points) in {(1, 5), (2, 2)}


class TestExpectedPoints:
    def test_two_competitor_expectation(self, favourite, underdog, rng):
        p = elo_win_probability(favourite.rating, underdog.rating)
        expected = 5 * p + 2 * (1 - p)

        average = expected_points([favourite, underdog], favourite.id, trials=20_000, rng=rng)
        assert average == pytest.approx(expected, abs=0.05)

    def test_dominant_competitor_converges_to_champion_points(self, rng):
        roster = [Competitor(1, 3000.0), Competitor(2, 0.0)]
        assert expected_points(roster, 1, trials=2_000, rng=rng) == pytest.approx(5.0, abs=0.01)

    def test_single_competitor_roster_is_champion(self, rng):
        assert expected_points([Competitor(1, 1200.0)], 1, trials=10, rng=rng) == 5.0

    def test_returns_float(self, roster_of, rng):
        assert isinstance(expected_points(roster_of(3), 1, trials=5, rng=rng), float)


class TestSummarizeTrials:
    def test_summary_statistics(self):
        results = [
            TrialResult(points=5, placement=1, eliminations=1),
            TrialResult(points=2, placement=2, eliminations=0),
            TrialResult(points=5, placement=1, eliminations=1),
            TrialResult(points=2, placement=2, eliminations=0),
        ]
        summary = summarize_trials(results)

        assert summary.trials == 4
        assert summary.mean == pytest.approx(3.5)
        assert summary.std == pytest.approx(np.std([5, 2, 5, 2], ddof=1))
        assert summary.stderr == pytest.approx(summary.std / 2)
        assert (summary.min_points, summary.max_points) == (2, 5)
        assert summary.champion_rate == pytest.approx(0.5)
        assert summary.mean_placement == pytest.approx(1.5)
        assert summary.mean_eliminations == pytest.approx(0.5)

    def test_single_trial_has_zero_spread(self):
        summary = summarize_trials([TrialResult(points=1, placement=7, eliminations=0)])
        assert summary.std == 0.0
        assert summary.stderr == 0.0

    def test_empty_results_rejected(self):
        with pytest.raises(InvalidTrialCount):
            summarize_trials([])
