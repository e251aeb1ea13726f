"""Pretty-print simulation output."""

from tabulate import tabulate

from models.competitor import Competitor, ScoreRecord
from tournament.aggregator import TrialSummary
from tournament.scorer import rank_scores


def format_points(value: float) -> str:
    """Format an average with at least 6 significant digits."""
    return f"{value:.6g}"


def print_expected_points(target: Competitor | int, average: float):
    """Print the tracked competitor's expected points."""
    print(f"\nExpected points for {target}: {format_points(average)}")


def print_trial_summary(summary: TrialSummary):
    """Print summary statistics of a Monte Carlo run."""
    print("\n=== TRIAL SUMMARY ===\n")
    rows = [
        ["Trials", f"{summary.trials:,}"],
        ["Mean points", format_points(summary.mean)],
        ["Std dev", f"{summary.std:.4f}"],
        ["Std error", f"{summary.stderr:.4f}"],
        ["Min / max points", f"{summary.min_points} / {summary.max_points}"],
        ["Champion rate", f"{summary.champion_rate:.1%}"],
        ["Mean placement", f"{summary.mean_placement:.2f}"],
        ["Mean eliminations", f"{summary.mean_eliminations:.2f}"],
    ]
    print(tabulate(rows, tablefmt="simple"))


def print_score_table(scores: dict[int, tuple[Competitor, ScoreRecord]],
                      highlight_id: int | None = None, limit: int | None = 20):
    """Print one bracket's scores, highest points first."""
    if limit is not None and limit < 0:
        raise ValueError(f"Row limit must be non-negative, got {limit}")

    print("\n=== BRACKET RESULTS ===\n")

    ranked = rank_scores(scores)
    rows = []
    for competitor, record in ranked[:limit] if limit else ranked:
        marker = "*" if competitor.id == highlight_id else ""
        rows.append([f"{competitor.id}{marker}", f"{competitor.rating:.0f}",
                     record.placement, record.eliminations, record.points])

    headers = ["Competitor", "Rating", "Place", "Elims", "Points"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))

    if limit and len(ranked) > limit:
        print(f"  ... {len(ranked) - limit} more")
