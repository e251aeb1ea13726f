"""Competitor, fight outcome and score record data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import config
from models.errors import InvalidRoster, ScoringStateError


@dataclass(frozen=True)
class Competitor:
    id: int
    rating: float  # Elo skill rating, fixed for the whole simulation
    current_rating: float | None = None  # carried, never used

    def __str__(self):
        return f"#{self.id} ({self.rating:.0f})"

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Competitor):
            return False
        return self.id == other.id


@dataclass(frozen=True)
class CombatOutcome:
    winner: Competitor
    loser: Competitor


# Fights in the order they happened
EliminationHistory = list[CombatOutcome]


class ScoreStatus(Enum):
    ALIVE = "alive"
    ELIMINATED = "eliminated"
    CHAMPION = "champion"


@dataclass
class ScoreRecord:
    """Running score for one competitor in one bracket.

    A record starts ALIVE and only counts eliminations. Placement and points
    are written exactly once, by either eliminate() or crown(); both are
    terminal.
    """

    points: int = 0
    placement: int = 0  # 0 until the competitor is placed
    eliminations: int = 0
    status: ScoreStatus = ScoreStatus.ALIVE

    def record_elimination(self):
        self._require_alive("record an elimination")
        self.eliminations += 1

    def eliminate(self, placement: int, points: int):
        self._require_alive("eliminate")
        self.placement = placement
        self.points = points
        self.status = ScoreStatus.ELIMINATED

    def crown(self, points: int):
        self._require_alive("crown")
        self.placement = config.CHAMPION_PLACEMENT
        self.points = points
        self.status = ScoreStatus.CHAMPION

    def _require_alive(self, action: str):
        if self.status is not ScoreStatus.ALIVE:
            raise ScoringStateError(f"Cannot {action}: record is already {self.status.value}")


def validate_roster(roster: list[Competitor]):
    """Raise InvalidRoster if any id appears more than once."""
    seen: set[int] = set()
    duplicates: list[int] = []
    for competitor in roster:
        if competitor.id in seen and competitor.id not in duplicates:
            duplicates.append(competitor.id)
        seen.add(competitor.id)
    if duplicates:
        raise InvalidRoster(duplicates)
