"""
Unit tests for the enumerated role and status labels.
"""
import pytest
from shared.enums import (
    MemberRole,
    TournamentStatus,
    VenueAvailability,
    MatchStatus,
    enum_values,
    in_clause,
    coerce
)


class TestEnumValues:
    """Stored labels must match the schema's allowed sets exactly."""

    def test_member_roles(self):
        assert enum_values(MemberRole) == ["Player", "Coach", "Referee", "Admin"]

    def test_tournament_statuses(self):
        assert enum_values(TournamentStatus) == ["Planned", "Ongoing", "Completed", "Cancelled"]

    def test_venue_availability(self):
        assert enum_values(VenueAvailability) == ["Available", "Booked", "Maintenance"]

    def test_match_statuses(self):
        assert enum_values(MatchStatus) == ["Scheduled", "Finished", "Postponed", "Cancelled"]

    def test_enums_are_string_enums(self):
        """Members compare equal to their stored label."""
        assert MemberRole.COACH == "Coach"
        assert isinstance(MatchStatus.FINISHED, str)


class TestInClause:

    def test_builds_check_sql(self):
        assert in_clause("availability_status", VenueAvailability) == (
            "availability_status IN ('Available','Booked','Maintenance')"
        )


class TestCoerce:

    def test_member_passes_through(self):
        assert coerce(MemberRole, MemberRole.ADMIN) is MemberRole.ADMIN

    def test_string_value(self):
        assert coerce(TournamentStatus, "Ongoing") is TournamentStatus.ONGOING

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            coerce(MemberRole, "Manager")

    def test_case_sensitive(self):
        """Labels are stored verbatim; no case folding."""
        with pytest.raises(ValueError):
            coerce(MatchStatus, "scheduled")
