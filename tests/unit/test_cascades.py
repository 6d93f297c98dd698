"""
Unit tests for delete behaviour.
Ownership edges cascade downwards; coach and referee references are cleared.
"""
from clubhouse.models import Club, Sport, Member, Team, TeamPlayer, Tournament, Venue, Match


class TestDeleteClub:

    def test_delete_seeded_club_removes_everything(self, registry, seeded, sample_match):
        assert seeded['club'] == 1

        success, message = registry.delete_club(1)

        assert success is True
        assert message == "Club deleted"
        assert set(registry.table_counts().values()) == {0}

    def test_other_club_untouched(self, registry, seeded):
        other = registry.create_club(club_name='Harbour AC')
        sport = registry.create_sport(other.id, 'Football')
        registry.create_member(other.id, 'Coach', 'Robin Hale')

        registry.delete_club(seeded['club'])

        assert Club.query.count() == 1
        assert registry.get_sport(sport.id) is not None
        assert len(registry.list_members(other.id)) == 1

    def test_delete_missing_club(self, registry):
        success, message = registry.delete_club(404)
        assert success is False
        assert message == "Club not found"


class TestDeleteSport:

    def test_cascades_to_teams_and_tournaments(self, registry, seeded, sample_match):
        success, _ = registry.delete_sport(seeded['sports']['football'])

        assert success is True
        assert Team.query.count() == 0
        assert TeamPlayer.query.count() == 0
        assert Tournament.query.count() == 0
        assert Match.query.count() == 0

    def test_keeps_club_members_and_venues(self, registry, seeded):
        registry.delete_sport(seeded['sports']['football'])

        assert registry.get_club(seeded['club']) is not None
        assert Member.query.count() == 4
        assert Venue.query.count() == 1
        assert [s.sport_name for s in registry.list_sports(seeded['club'])] == ['Basketball']


class TestDeleteMember:

    def test_coach_reference_cleared(self, registry, seeded):
        """Deleting the coach keeps the team without a coach."""
        success, _ = registry.delete_member(seeded['members']['coach'])

        assert success is True
        team = registry.get_team(seeded['team'])
        assert team is not None
        assert team.coach_id is None

    def test_coach_reference_cleared_when_loaded(self, registry, seeded):
        """Same result when the coach's teams are already in the session."""
        coach = registry.get_member(seeded['members']['coach'])
        assert [t.id for t in coach.coached_teams] == [seeded['team']]

        registry.delete_member(coach.id)

        assert registry.get_team(seeded['team']).coach_id is None

    def test_referee_reference_cleared(self, registry, seeded, sample_match):
        registry.delete_member(seeded['members']['referee'])

        match = registry.get_match(sample_match)
        assert match is not None
        assert match.referee_id is None

    def test_roster_rows_removed(self, registry, seeded):
        registry.delete_member(seeded['members']['striker'])

        roster = registry.list_roster(seeded['team'])
        assert [p.jersey_number for p in roster] == [10]
        assert registry.get_team_player(seeded['team_players'][0]) is None

    def test_club_untouched(self, registry, seeded):
        registry.delete_member(seeded['members']['coach'])

        assert registry.get_club(seeded['club']) is not None
        assert Member.query.count() == 3


class TestDeleteTeam:

    def test_cascades_to_roster_and_matches(self, registry, seeded, sample_match):
        registry.delete_team(seeded['team'])

        assert TeamPlayer.query.count() == 0
        assert registry.get_match(sample_match) is None

    def test_away_team_delete_cascades(self, registry, seeded, second_team, sample_match):
        registry.delete_team(second_team)

        assert registry.get_match(sample_match) is None
        assert registry.get_team(seeded['team']) is not None

    def test_members_survive(self, registry, seeded):
        registry.delete_team(seeded['team'])

        assert Member.query.count() == 4
        assert registry.get_tournament(seeded['tournament']) is not None


class TestDeleteTournamentAndVenue:

    def test_tournament_cascades_to_matches(self, registry, seeded, sample_match):
        registry.delete_tournament(seeded['tournament'])

        assert Match.query.count() == 0
        assert Team.query.count() == 2
        assert registry.get_venue(seeded['venue']) is not None

    def test_venue_cascades_to_matches(self, registry, seeded, sample_match):
        registry.delete_venue(seeded['venue'])

        assert Match.query.count() == 0
        assert registry.get_tournament(seeded['tournament']) is not None

    def test_delete_match_only(self, registry, seeded, sample_match):
        success, message = registry.delete_match(sample_match)

        assert (success, message) == (True, "Match deleted")
        assert Team.query.count() == 2
        assert registry.get_tournament(seeded['tournament']) is not None

    def test_delete_team_player_only(self, registry, seeded):
        registry.delete_team_player(seeded['team_players'][0])

        assert registry.get_member(seeded['members']['striker']) is not None
        assert len(registry.list_roster(seeded['team'])) == 1

    def test_delete_missing_rows(self, registry):
        assert registry.delete_match(1) == (False, "Match not found")
        assert registry.delete_venue(1) == (False, "Venue not found")
        assert registry.delete_team_player(1) == (False, "TeamPlayer not found")
