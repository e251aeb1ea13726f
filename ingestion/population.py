"""Synthetic competitor population.

Draws a large pool of Elo ratings from a normal distribution, then samples a
tournament roster out of it. The tracked competitor is added on top of the
sampled opponents.
"""

import logging

import numpy as np

import config
from models.competitor import Competitor
from models.errors import InvalidPopulation

logger = logging.getLogger(__name__)


def generate_population(size: int = config.DEFAULT_POPULATION_SIZE,
                        mean: float = config.DEFAULT_POPULATION_MEAN,
                        std: float = config.DEFAULT_POPULATION_STD,
                        rng: np.random.Generator | None = None,
                        first_id: int = 1) -> list[Competitor]:
    """Draw a population of competitors with normally distributed ratings.

    Args:
        size: Number of competitors
        mean: Mean Elo rating
        std: Rating standard deviation (0 gives everyone the mean)
        rng: Random number generator
        first_id: Id of the first competitor, the rest count up from it

    Returns:
        Competitors with ids first_id .. first_id + size - 1
    """
    if size < 0:
        raise InvalidPopulation(f"Population size must be non-negative, got {size}")
    if std < 0:
        raise InvalidPopulation(f"Rating standard deviation must be non-negative, got {std}")
    if rng is None:
        rng = np.random.default_rng()

    ratings = rng.normal(mean, std, size=size)
    population = [
        Competitor(id=first_id + i, rating=float(r), current_rating=config.DEFAULT_CURRENT_RATING)
        for i, r in enumerate(ratings)
    ]
    logger.info("Generated population of %d (mean %.1f, std %.1f)", size, mean, std)
    return population


def sample_roster(population: list[Competitor], n: int,
                  rng: np.random.Generator | None = None) -> list[Competitor]:
    """Sample n distinct competitors from the population."""
    if n < 0 or n > len(population):
        raise InvalidPopulation(
            f"Cannot sample {n} competitors from a population of {len(population)}")
    if rng is None:
        rng = np.random.default_rng()

    picks = rng.choice(len(population), size=n, replace=False)
    return [population[i] for i in picks]


def build_roster(roster_size: int = config.DEFAULT_ROSTER_SIZE,
                 target_id: int = config.DEFAULT_TARGET_ID,
                 target_rating: float = config.DEFAULT_TARGET_RATING,
                 population_size: int = config.DEFAULT_POPULATION_SIZE,
                 mean: float = config.DEFAULT_POPULATION_MEAN,
                 std: float = config.DEFAULT_POPULATION_STD,
                 rng: np.random.Generator | None = None) -> list[Competitor]:
    """Build a roster of roster_size sampled opponents plus the target.

    Population ids that collide with target_id are skipped, so the target is
    always unique in the returned roster.
    """
    if rng is None:
        rng = np.random.default_rng()

    population = [c for c in generate_population(population_size, mean, std, rng)
                  if c.id != target_id]
    roster = sample_roster(population, roster_size, rng)
    roster.append(Competitor(id=target_id, rating=target_rating, current_rating=0.0))
    return roster
