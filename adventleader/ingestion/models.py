"""
Leaderboard data model.

Typed, immutable view of one fetched leaderboard snapshot. Built from the
decoded JSON payload with Leaderboard.from_dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping

from adventleader.ingestion.timecodec import (
    ZERO_TIMESTAMP,
    MalformedTimestamp,
    coerce_timestamp,
)
from adventleader.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class SchemaError(ValueError):
    """Raised when a payload does not have the leaderboard shape"""
    pass


def _timestamp_or_zero(value: Any, context: str) -> datetime:
    """Parse one timestamp field; a malformed value is logged and read as zero."""
    try:
        return coerce_timestamp(value)
    except MalformedTimestamp as e:
        logger.warning(f"{context}: {e}; using zero timestamp")
        return ZERO_TIMESTAMP


def _as_int(raw: Mapping[str, Any], key: str, context: str) -> int:
    value = raw.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool):
        raise SchemaError(f"{context}: '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise SchemaError(f"{context}: '{key}' must be an integer, got {value!r}")


@dataclass(frozen=True)
class Level:
    star_ts: datetime = ZERO_TIMESTAMP


@dataclass(frozen=True)
class Member:
    id: str
    name: str = ""
    stars: int = 0
    local_score: int = 0
    global_score: int = 0
    last_star_ts: datetime = ZERO_TIMESTAMP
    completion_days: Dict[str, Dict[str, Level]] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        """Member name, or the member id for anonymous users."""
        return self.name or self.id

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], member_key: str = "") -> Member:
        """
        Build a Member from its JSON object.

        Args:
            raw: Member object from the payload
            member_key: Key of the member in the `members` map, used as the id
                when the object does not carry one

        Raises:
            SchemaError: If the object is not a mapping or a count is not numeric
        """
        if not isinstance(raw, Mapping):
            raise SchemaError(f"Member {member_key!r} must be an object")

        member_id = raw.get("id")
        member_id = str(member_id) if member_id is not None else str(member_key)
        context = f"member {member_id}"

        days_raw = raw.get("completion_day_level") or {}
        if not isinstance(days_raw, Mapping):
            raise SchemaError(f"{context}: 'completion_day_level' must be an object")

        days: Dict[str, Dict[str, Level]] = {}
        for day, levels in days_raw.items():
            if not isinstance(levels, Mapping):
                raise SchemaError(f"{context}: day {day!r} must be an object")
            days[str(day)] = {
                str(level): Level(
                    star_ts=_timestamp_or_zero(
                        info.get("get_star_ts") if isinstance(info, Mapping) else None,
                        f"{context} day {day} level {level}",
                    )
                )
                for level, info in levels.items()
            }

        return cls(
            id=member_id,
            name=raw.get("name") or "",
            stars=_as_int(raw, "stars", context),
            local_score=_as_int(raw, "local_score", context),
            global_score=_as_int(raw, "global_score", context),
            last_star_ts=_timestamp_or_zero(raw.get("last_star_ts"), context),
            completion_days=days,
        )


@dataclass(frozen=True)
class Leaderboard:
    owner_id: str
    event: str
    members: Dict[str, Member] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Leaderboard:
        """
        Build a Leaderboard from the decoded JSON payload.

        Malformed timestamps are recovered per record; structural problems
        (missing `members`, non-object members, non-numeric scores) raise.

        Raises:
            SchemaError: If the payload does not have the leaderboard shape
        """
        if not isinstance(raw, Mapping):
            raise SchemaError(f"Leaderboard must be a JSON object, got {type(raw).__name__}")

        members_raw = raw.get("members")
        if not isinstance(members_raw, Mapping):
            raise SchemaError("Leaderboard has no 'members' object")

        members = {
            str(key): Member.from_dict(value, member_key=str(key))
            for key, value in members_raw.items()
        }

        owner_id = raw.get("owner_id")
        return cls(
            owner_id=str(owner_id) if owner_id is not None else "",
            event=str(raw.get("event") or ""),
            members=members,
        )
