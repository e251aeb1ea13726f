"""Battle royale expected-points estimator - CLI entry point.

Usage:
    python cli.py simulate [--trials 1000] [--roster-size 99] [--target-rating 1600]
    python cli.py simulate --roster roster.csv --target-id 7 [--trials 10000]
    python cli.py bracket [--seed 42]
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from logging_config import setup_logging

logger = logging.getLogger("cli")


def load_roster(args, rng):
    """Build the roster from a CSV file or by sampling a synthetic population."""
    if args.roster:
        from ingestion.roster_loader import load_roster_from_csv
        return load_roster_from_csv(args.roster)

    from ingestion.population import build_roster
    return build_roster(
        roster_size=args.roster_size,
        target_id=args.target_id,
        target_rating=args.target_rating,
        population_size=args.population_size,
        mean=args.mean,
        std=args.std,
        rng=rng,
    )


# --- Commands ---

def cmd_simulate(args, rng):
    """Estimate the target's expected points with Monte Carlo trials."""
    from output.printer import print_expected_points, print_trial_summary
    from tournament.aggregator import run_trials, summarize_trials

    roster = load_roster(args, rng)
    results = run_trials(roster, args.target_id, args.trials, rng=rng,
                         show_progress=not args.no_progress)
    summary = summarize_trials(results)

    target = next((c for c in roster if c.id == args.target_id), args.target_id)
    print_expected_points(target, summary.mean)
    print_trial_summary(summary)


def cmd_bracket(args, rng):
    """Run a single bracket and show everyone's score."""
    from output.printer import print_score_table
    from tournament.bracket import simulate_bracket
    from tournament.scorer import score_history
    from models.competitor import validate_roster

    roster = load_roster(args, rng)
    validate_roster(roster)
    history = simulate_bracket(roster, rng)
    scores = score_history(history, len(roster), roster)

    print(f"\n{len(roster)} competitors, {len(history)} fights")
    print_score_table(scores, highlight_id=args.target_id, limit=args.limit)


# --- Main ---

def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


def add_roster_arguments(parser):
    parser.add_argument("--roster", help="CSV file with id,rating[,current_rating] columns")
    parser.add_argument("--roster-size", type=int, default=config.DEFAULT_ROSTER_SIZE,
                        help="Opponents sampled from the population")
    parser.add_argument("--population-size", type=int, default=config.DEFAULT_POPULATION_SIZE)
    parser.add_argument("--mean", type=float, default=config.DEFAULT_POPULATION_MEAN,
                        help="Mean population rating")
    parser.add_argument("--std", type=float, default=config.DEFAULT_POPULATION_STD,
                        help="Population rating standard deviation")
    parser.add_argument("--target-id", type=int, default=config.DEFAULT_TARGET_ID)
    parser.add_argument("--target-rating", type=float, default=config.DEFAULT_TARGET_RATING)
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED)
    parser.add_argument("--log-level", default=config.DEFAULT_LOG_LEVEL)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Battle Royale Expected Points Estimator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py simulate --trials 10000          # 99 sampled opponents + one 1600 competitor
  python cli.py simulate --std 150 --seed 7      # spread out the opponent ratings
  python cli.py bracket --limit 10               # score table for one bracket
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # simulate
    p_sim = subparsers.add_parser("simulate", help="Estimate expected points over many brackets")
    add_roster_arguments(p_sim)
    p_sim.add_argument("--trials", type=int, default=config.DEFAULT_TRIALS)
    p_sim.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    # bracket
    p_bracket = subparsers.add_parser("bracket", help="Run and score a single bracket")
    add_roster_arguments(p_bracket)
    p_bracket.add_argument("--limit", type=non_negative_int, default=20, help="Rows to show (0 for all)")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.log_level)

    import numpy as np
    rng = np.random.default_rng(args.seed)

    commands = {
        "simulate": cmd_simulate,
        "bracket": cmd_bracket,
    }

    try:
        commands[args.command](args, rng)
    except ValueError as e:
        logger.error("%s", e)
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
