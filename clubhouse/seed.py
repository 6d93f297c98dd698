"""
Sample club dataset.

One club with two sports, four members (two players, a coach and a
referee), one coached team with two rostered players, one tournament and
one venue. No matches: the only sample match pits a team against itself
and is kept as a rejected-insert test case, not as seed data.
"""
from datetime import date

from shared.enums import MemberRole, TournamentStatus, VenueAvailability
from .registry import ClubRegistry


def seed_sample_data(registry: ClubRegistry) -> dict:
    """Insert the sample dataset and return the ids of the rows created."""
    club = registry.create_club(
        club_name='Riverside Sports Club',
        address='12 River Road, Springfield',
        contact_number='555-0100',
        email='info@riversidesc.example',
        founded_year=1998
    )

    football = registry.create_sport(club.id, 'Football', rules='11-a-side, two 45 minute halves')
    basketball = registry.create_sport(club.id, 'Basketball', rules='5-a-side, four 10 minute quarters')

    striker = registry.create_member(
        club.id, MemberRole.PLAYER, 'Alex Morgan',
        date_of_birth=date(2001, 4, 12), gender='Female',
        contact_number='555-0111', join_date=date(2020, 1, 15)
    )
    midfielder = registry.create_member(
        club.id, MemberRole.PLAYER, 'Sam Carter',
        date_of_birth=date(1999, 9, 3), gender='Male',
        contact_number='555-0112', join_date=date(2019, 6, 1)
    )
    coach = registry.create_member(
        club.id, MemberRole.COACH, 'Jordan Blake',
        date_of_birth=date(1980, 2, 20), gender='Male',
        contact_number='555-0113', join_date=date(2015, 3, 10)
    )
    referee = registry.create_member(
        club.id, MemberRole.REFEREE, 'Taylor Reed',
        date_of_birth=date(1985, 11, 30), gender='Female',
        contact_number='555-0114', join_date=date(2018, 8, 22)
    )

    team = registry.create_team(football.id, 'Riverside FC', coach_id=coach.id, created_date=date(2015, 3, 10))

    roster = [
        registry.create_team_player(team.id, striker.id, position='Forward', jersey_number=9,
                                    joined_date=date(2020, 1, 20)),
        registry.create_team_player(team.id, midfielder.id, position='Midfielder', jersey_number=10,
                                    joined_date=date(2019, 6, 5)),
    ]

    tournament = registry.create_tournament(
        football.id, 'Spring Cup',
        start_date=date(2024, 3, 1), end_date=date(2024, 5, 31),
        tournament_type='League', status=TournamentStatus.PLANNED
    )

    venue = registry.create_venue(
        club.id, 'Riverside Stadium',
        location='12 River Road, Springfield', capacity=5000,
        venue_type='Stadium', availability_status=VenueAvailability.AVAILABLE
    )

    return {
        'club': club.id,
        'sports': {'football': football.id, 'basketball': basketball.id},
        'members': {
            'striker': striker.id,
            'midfielder': midfielder.id,
            'coach': coach.id,
            'referee': referee.id,
        },
        'team': team.id,
        'team_players': [player.id for player in roster],
        'tournament': tournament.id,
        'venue': venue.id,
    }
