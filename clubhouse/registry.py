import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from shared.enums import MemberRole, TournamentStatus, VenueAvailability, MatchStatus, coerce, enum_values
from .errors import CheckViolation, ReferenceViolation, NotFoundError, translate_integrity_error
from .models import db, ALL_MODELS, Club, Sport, Member, Team, TeamPlayer, Tournament, Venue, Match

logger = logging.getLogger(__name__)


class ClubRegistry:
    """
    Row-level operations on the club schema:
    - Create/read/update/delete for all eight tables
    - Enumerated fields and references checked before the write
    - Uniqueness, distinct match teams and cascades enforced by the database

    Each operation commits on its own. A rejected operation rolls the session
    back and raises a ConstraintViolation subclass; nothing is written.
    """

    # Foreign key columns and the model each must point at
    REFERENCES = {
        Sport: {'club_id': Club},
        Member: {'club_id': Club},
        Team: {'sport_id': Sport, 'coach_id': Member},
        TeamPlayer: {'team_id': Team, 'member_id': Member},
        Tournament: {'sport_id': Sport},
        Venue: {'club_id': Club},
        Match: {
            'tournament_id': Tournament,
            'venue_id': Venue,
            'team1_id': Team,
            'team2_id': Team,
            'referee_id': Member,
        },
    }

    ENUM_FIELDS = {
        Member: {'role': MemberRole},
        Tournament: {'status': TournamentStatus},
        Venue: {'availability_status': VenueAvailability},
        Match: {'status': MatchStatus},
    }

    # ==================== Internals ====================

    def _commit(self, action: str):
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            violation = translate_integrity_error(e)
            logger.warning(f"{action} rejected: {violation.kind} {violation.message}")
            raise violation from e
        except Exception as e:
            db.session.rollback()
            logger.error(f"{action} failed: {e}")
            raise

    def _enum_value(self, enum_cls, value, field: str) -> str:
        try:
            return coerce(enum_cls, value).value
        except ValueError:
            raise CheckViolation(
                f"{field}={value!r} is not one of {enum_values(enum_cls)}",
                constraint=field
            ) from None

    def _check_reference(self, target, row_id, field: str):
        if db.session.get(target, row_id) is None:
            raise ReferenceViolation(
                f"{field}={row_id} does not reference an existing {target.__name__}",
                constraint=field
            )

    def _validate(self, model, fields: dict) -> dict:
        """Normalize enum values and verify references; returns the cleaned fields."""
        cleaned = dict(fields)

        for field, enum_cls in self.ENUM_FIELDS.get(model, {}).items():
            if cleaned.get(field) is not None:
                cleaned[field] = self._enum_value(enum_cls, cleaned[field], field)

        for field, target in self.REFERENCES.get(model, {}).items():
            if cleaned.get(field) is not None:
                self._check_reference(target, cleaned[field], field)

        return cleaned

    def _check_distinct_teams(self, team1_id, team2_id):
        if team1_id is not None and team1_id == team2_id:
            raise CheckViolation(
                f"A match needs two different teams (team1_id=team2_id={team1_id})",
                constraint='ck_matches_distinct_teams'
            )

    def _create(self, model, **fields):
        fields = self._validate(model, fields)
        row = model(**fields)
        db.session.add(row)
        self._commit(f"Create {model.__name__}")
        logger.info(f"Created {model.__name__} {row.id}")
        return row

    def _get(self, model, row_id):
        return db.session.get(model, row_id)

    def _update(self, model, row_id, fields: dict, before_write=None):
        row = self._get(model, row_id)
        if row is None:
            raise NotFoundError(model.__name__, row_id)

        columns = set(model.__table__.columns.keys())
        unknown = sorted(set(fields) - columns)
        if unknown:
            raise ValueError(f"Unknown {model.__name__} fields: {', '.join(unknown)}")
        if 'id' in fields:
            raise ValueError(f"{model.__name__} id cannot be changed")

        fields = self._validate(model, fields)
        if before_write:
            before_write(row, fields)

        for name, value in fields.items():
            setattr(row, name, value)
        self._commit(f"Update {model.__name__} {row_id}")
        logger.info(f"Updated {model.__name__} {row_id}: {', '.join(sorted(fields))}")
        return row

    def _delete(self, model, row_id) -> Tuple[bool, str]:
        row = self._get(model, row_id)
        if not row:
            return False, f"{model.__name__} not found"

        # Dependents go with it via ON DELETE CASCADE / SET NULL
        db.session.delete(row)
        self._commit(f"Delete {model.__name__} {row_id}")
        logger.info(f"Deleted {model.__name__} {row_id}")
        return True, f"{model.__name__} deleted"

    # ==================== Clubs ====================

    def create_club(
        self,
        club_name: str,
        address: str = None,
        contact_number: str = None,
        email: str = None,
        founded_year: int = None
    ) -> Club:
        return self._create(
            Club,
            club_name=club_name,
            address=address,
            contact_number=contact_number,
            email=email,
            founded_year=founded_year
        )

    def get_club(self, club_id: int) -> Optional[Club]:
        return self._get(Club, club_id)

    def list_clubs(self) -> List[Club]:
        return Club.query.order_by(Club.club_name).all()

    def update_club(self, club_id: int, **fields) -> Club:
        return self._update(Club, club_id, fields)

    def delete_club(self, club_id: int) -> Tuple[bool, str]:
        """Delete a club with its sports, members and venues, and everything under them."""
        return self._delete(Club, club_id)

    # ==================== Sports ====================

    def create_sport(self, club_id: int, sport_name: str, rules: str = None) -> Sport:
        return self._create(Sport, club_id=club_id, sport_name=sport_name, rules=rules)

    def get_sport(self, sport_id: int) -> Optional[Sport]:
        return self._get(Sport, sport_id)

    def list_sports(self, club_id: int) -> List[Sport]:
        return Sport.query.filter_by(club_id=club_id).order_by(Sport.sport_name).all()

    def update_sport(self, sport_id: int, **fields) -> Sport:
        return self._update(Sport, sport_id, fields)

    def delete_sport(self, sport_id: int) -> Tuple[bool, str]:
        return self._delete(Sport, sport_id)

    # ==================== Members ====================

    def create_member(
        self,
        club_id: int,
        role,
        full_name: str,
        date_of_birth: date = None,
        gender: str = None,
        contact_number: str = None,
        join_date: date = None,
        is_active: bool = True
    ) -> Member:
        return self._create(
            Member,
            club_id=club_id,
            role=role,
            full_name=full_name,
            date_of_birth=date_of_birth,
            gender=gender,
            contact_number=contact_number,
            join_date=join_date or date.today(),
            is_active=is_active
        )

    def get_member(self, member_id: int) -> Optional[Member]:
        return self._get(Member, member_id)

    def list_members(self, club_id: int, role=None, active: bool = None) -> List[Member]:
        query = Member.query.filter_by(club_id=club_id)

        if role is not None:
            query = query.filter_by(role=self._enum_value(MemberRole, role, 'role'))
        if active is not None:
            query = query.filter_by(is_active=active)

        return query.order_by(Member.id).all()

    def update_member(self, member_id: int, **fields) -> Member:
        return self._update(Member, member_id, fields)

    def delete_member(self, member_id: int) -> Tuple[bool, str]:
        """
        Delete a member. Teams they coach and matches they referee are kept
        with the reference cleared; their roster entries are removed.
        """
        return self._delete(Member, member_id)

    # ==================== Teams ====================

    def create_team(
        self,
        sport_id: int,
        team_name: str,
        coach_id: int = None,
        created_date: date = None
    ) -> Team:
        return self._create(
            Team,
            sport_id=sport_id,
            team_name=team_name,
            coach_id=coach_id,
            created_date=created_date or date.today()
        )

    def get_team(self, team_id: int) -> Optional[Team]:
        return self._get(Team, team_id)

    def list_teams(self, sport_id: int) -> List[Team]:
        return Team.query.filter_by(sport_id=sport_id).order_by(Team.team_name).all()

    def update_team(self, team_id: int, **fields) -> Team:
        return self._update(Team, team_id, fields)

    def assign_coach(self, team_id: int, member_id: Optional[int]) -> Team:
        """Set or clear (member_id=None) the coach of a team."""
        return self._update(Team, team_id, {'coach_id': member_id})

    def delete_team(self, team_id: int) -> Tuple[bool, str]:
        return self._delete(Team, team_id)

    # ==================== Team players ====================

    def create_team_player(
        self,
        team_id: int,
        member_id: int,
        position: str = None,
        jersey_number: int = None,
        joined_date: date = None,
        is_active: bool = True
    ) -> TeamPlayer:
        return self._create(
            TeamPlayer,
            team_id=team_id,
            member_id=member_id,
            position=position,
            jersey_number=jersey_number,
            joined_date=joined_date or date.today(),
            is_active=is_active
        )

    def get_team_player(self, team_player_id: int) -> Optional[TeamPlayer]:
        return self._get(TeamPlayer, team_player_id)

    def list_roster(self, team_id: int, active: bool = None) -> List[TeamPlayer]:
        query = TeamPlayer.query.filter_by(team_id=team_id)

        if active is not None:
            query = query.filter_by(is_active=active)

        return query.order_by(TeamPlayer.jersey_number).all()

    def update_team_player(self, team_player_id: int, **fields) -> TeamPlayer:
        return self._update(TeamPlayer, team_player_id, fields)

    def delete_team_player(self, team_player_id: int) -> Tuple[bool, str]:
        return self._delete(TeamPlayer, team_player_id)

    # ==================== Tournaments ====================

    def create_tournament(
        self,
        sport_id: int,
        tournament_name: str,
        start_date: date = None,
        end_date: date = None,
        tournament_type: str = None,
        status=TournamentStatus.PLANNED
    ) -> Tournament:
        return self._create(
            Tournament,
            sport_id=sport_id,
            tournament_name=tournament_name,
            start_date=start_date,
            end_date=end_date,
            tournament_type=tournament_type,
            status=status
        )

    def get_tournament(self, tournament_id: int) -> Optional[Tournament]:
        return self._get(Tournament, tournament_id)

    def list_tournaments(self, sport_id: int, status=None) -> List[Tournament]:
        query = Tournament.query.filter_by(sport_id=sport_id)

        if status is not None:
            query = query.filter_by(status=self._enum_value(TournamentStatus, status, 'status'))

        return query.order_by(Tournament.start_date, Tournament.id).all()

    def update_tournament(self, tournament_id: int, **fields) -> Tournament:
        """Any status may follow any other; there are no transition rules."""
        return self._update(Tournament, tournament_id, fields)

    def delete_tournament(self, tournament_id: int) -> Tuple[bool, str]:
        return self._delete(Tournament, tournament_id)

    # ==================== Venues ====================

    def create_venue(
        self,
        club_id: int,
        venue_name: str,
        location: str = None,
        capacity: int = None,
        venue_type: str = None,
        availability_status=VenueAvailability.AVAILABLE
    ) -> Venue:
        return self._create(
            Venue,
            club_id=club_id,
            venue_name=venue_name,
            location=location,
            capacity=capacity,
            venue_type=venue_type,
            availability_status=availability_status
        )

    def get_venue(self, venue_id: int) -> Optional[Venue]:
        return self._get(Venue, venue_id)

    def list_venues(self, club_id: int, availability=None) -> List[Venue]:
        query = Venue.query.filter_by(club_id=club_id)

        if availability is not None:
            value = self._enum_value(VenueAvailability, availability, 'availability_status')
            query = query.filter_by(availability_status=value)

        return query.order_by(Venue.venue_name).all()

    def update_venue(self, venue_id: int, **fields) -> Venue:
        return self._update(Venue, venue_id, fields)

    def delete_venue(self, venue_id: int) -> Tuple[bool, str]:
        return self._delete(Venue, venue_id)

    # ==================== Matches ====================

    def create_match(
        self,
        tournament_id: int,
        venue_id: int,
        team1_id: int,
        team2_id: int,
        scheduled_at: datetime,
        referee_id: int = None,
        status=MatchStatus.SCHEDULED,
        team1_score: int = None,
        team2_score: int = None,
        result: str = None
    ) -> Match:
        self._check_distinct_teams(team1_id, team2_id)
        return self._create(
            Match,
            tournament_id=tournament_id,
            venue_id=venue_id,
            team1_id=team1_id,
            team2_id=team2_id,
            referee_id=referee_id,
            scheduled_at=scheduled_at,
            status=status,
            team1_score=team1_score,
            team2_score=team2_score,
            result=result
        )

    def get_match(self, match_id: int) -> Optional[Match]:
        return self._get(Match, match_id)

    def list_matches(self, tournament_id: int) -> List[Match]:
        return Match.query.filter_by(tournament_id=tournament_id).order_by(Match.scheduled_at).all()

    def update_match(self, match_id: int, **fields) -> Match:
        def check_teams(match, changes):
            self._check_distinct_teams(
                changes.get('team1_id', match.team1_id),
                changes.get('team2_id', match.team2_id)
            )

        return self._update(Match, match_id, fields, before_write=check_teams)

    def assign_referee(self, match_id: int, member_id: Optional[int]) -> Match:
        """Set or clear (member_id=None) the referee of a match."""
        return self.update_match(match_id, referee_id=member_id)

    def record_match_result(
        self,
        match_id: int,
        team1_score: int,
        team2_score: int,
        result: str = None,
        status=MatchStatus.FINISHED
    ) -> Match:
        """Store the scores and status; a stored result text is kept when result is None."""
        fields = {
            'team1_score': team1_score,
            'team2_score': team2_score,
            'status': status,
        }
        if result is not None:
            fields['result'] = result
        return self.update_match(match_id, **fields)

    def delete_match(self, match_id: int) -> Tuple[bool, str]:
        return self._delete(Match, match_id)

    # ==================== Reporting ====================

    def table_counts(self) -> Dict[str, int]:
        """Row count of every table."""
        counts = {model.__tablename__: model.query.count() for model in ALL_MODELS}
        logger.debug(f"Table counts: {counts}")
        return counts
