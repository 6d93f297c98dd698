"""
Enumerated labels stored by the club schema: member roles, tournament and
match status, venue availability.

These are closed sets only. Any label may follow any other; there are no
transition rules.
"""
from enum import Enum
from typing import List, Type


class MemberRole(str, Enum):
    PLAYER = "Player"
    COACH = "Coach"
    REFEREE = "Referee"
    ADMIN = "Admin"


class TournamentStatus(str, Enum):
    PLANNED = "Planned"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class VenueAvailability(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"
    MAINTENANCE = "Maintenance"


class MatchStatus(str, Enum):
    SCHEDULED = "Scheduled"
    FINISHED = "Finished"
    POSTPONED = "Postponed"
    CANCELLED = "Cancelled"


def enum_values(enum_cls: Type[Enum]) -> List[str]:
    return [member.value for member in enum_cls]


def in_clause(column: str, enum_cls: Type[Enum]) -> str:
    """Build the SQL for a CHECK constraint restricting column to enum_cls."""
    allowed = ",".join(f"'{value}'" for value in enum_values(enum_cls))
    return f"{column} IN ({allowed})"


def coerce(enum_cls: Type[Enum], value):
    """
    Return the enum member for value.

    Accepts a member of enum_cls or its exact string value. Raises ValueError
    for anything else; no case folding, status labels are stored verbatim.
    """
    if isinstance(value, enum_cls):
        return value
    return enum_cls(value)
