"""Load a roster from a user-prepared CSV.

Expected columns: id, rating [, current_rating]
"""

import logging

import pandas as pd

from models.competitor import Competitor, validate_roster

logger = logging.getLogger(__name__)


def load_roster_from_csv(filepath: str) -> list[Competitor]:
    df = pd.read_csv(filepath)
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = {"id", "rating"} - set(df.columns)
    if missing:
        raise ValueError(f"Roster CSV {filepath} is missing columns: {sorted(missing)}")

    roster = []
    for _, row in df.iterrows():
        current = row.get("current_rating")
        roster.append(Competitor(
            id=int(row["id"]),
            rating=float(row["rating"]),
            current_rating=None if current is None or pd.isna(current) else float(current),
        ))

    validate_roster(roster)
    logger.info("Loaded %d competitors from %s", len(roster), filepath)
    return roster
