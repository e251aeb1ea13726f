"""Central configuration for the battle royale points estimator."""

# Scoring: points for final placement, checked top-down (placement <= bound)
# 1st = 5, 2nd-3rd = 2, 4th-10th = 1, everyone else 0
PLACEMENT_POINTS = [(1, 5), (3, 2), (10, 1)]

# Scoring: bonus points for eliminations, checked top-down (elims >= bound)
ELIMINATION_POINTS = [(7, 3), (5, 2), (3, 1)]

CHAMPION_PLACEMENT = 1

# Elo logistic scale
ELO_SCALE = 400.0

# Monte Carlo settings
DEFAULT_TRIALS = 1_000
DEFAULT_SEED = None

# Population the roster is sampled from
DEFAULT_POPULATION_SIZE = 10_000
DEFAULT_POPULATION_MEAN = 1200.0
DEFAULT_POPULATION_STD = 0.0
DEFAULT_CURRENT_RATING = 1000.0

# Roster: sampled opponents plus the tracked competitor
DEFAULT_ROSTER_SIZE = 99
DEFAULT_TARGET_ID = 100
DEFAULT_TARGET_RATING = 1600.0

DEFAULT_LOG_LEVEL = "WARNING"
