"""
Leaderboard Ranker

Orders the members of a snapshot by local score (stars break ties) and finds
the most recent star across the whole board. Members are sorted as a pandas
table so the resulting order depends on the sort keys only, never on the
iteration order of the members map; member id is the last key so that equal
score/star pairs still come out in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

import pandas as pd

from adventleader.ingestion.models import Leaderboard, Member
from adventleader.ingestion.timecodec import ZERO_TIMESTAMP

SORT_COLUMNS = ["local_score", "stars", "id"]
SORT_ASCENDING = [False, False, True]


@dataclass(frozen=True)
class RankedReport:
    members: Tuple[Member, ...]
    max_last_star: datetime = ZERO_TIMESTAMP


def latest_star(members) -> datetime:
    """Newest `last_star_ts` among members; ZERO_TIMESTAMP if nobody has a star."""
    return max((m.last_star_ts for m in members), default=ZERO_TIMESTAMP)


def rank(leaderboard: Leaderboard) -> RankedReport:
    """
    Rank every member of a leaderboard.

    Zero-star members are ranked too (they are only hidden when rendering).

    Args:
        leaderboard: Snapshot to rank

    Returns:
        RankedReport with members sorted by local score desc, stars desc
    """
    members = list(leaderboard.members.values())

    df = pd.DataFrame(
        [
            {"pos": i, "id": m.id, "local_score": m.local_score, "stars": m.stars}
            for i, m in enumerate(members)
        ],
        columns=["pos", "id", "local_score", "stars"],
    )
    df = df.sort_values(SORT_COLUMNS, ascending=SORT_ASCENDING, kind="mergesort")

    ordered = tuple(members[pos] for pos in df["pos"].tolist())
    return RankedReport(members=ordered, max_last_star=latest_star(members))


def report_frame(report: RankedReport) -> pd.DataFrame:
    """Tabulate a report for console logging."""
    df = pd.DataFrame(
        [
            {
                "rank": i + 1,
                "name": m.display_name,
                "local_score": m.local_score,
                "stars": m.stars,
                "global_score": m.global_score,
            }
            for i, m in enumerate(report.members)
        ],
        columns=["rank", "name", "local_score", "stars", "global_score"],
    )
    return df
