"""
Club management schema.

Ownership edges (club -> sport -> team, ...) cascade on delete. Advisory
edges (team coach, match referee) are cleared instead. Both are declared on
the foreign keys so the database enforces them, and mirrored on the
relationships with passive_deletes so the ORM leaves unloaded rows to it.
"""
import sqlite3
from datetime import date

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

from shared.enums import MemberRole, TournamentStatus, VenueAvailability, MatchStatus, in_clause

db = SQLAlchemy()


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def _iso(value):
    return value.isoformat() if value else None


class Club(db.Model):
    __tablename__ = 'clubs'

    id = db.Column(db.Integer, primary_key=True)
    club_name = db.Column(db.String(100), unique=True, nullable=False)
    address = db.Column(db.String(255), nullable=True)
    contact_number = db.Column(db.String(20), nullable=True)
    email = db.Column(db.String(100), nullable=True)
    founded_year = db.Column(db.Integer, nullable=True)

    sports = db.relationship('Sport', back_populates='club', cascade='all, delete-orphan', passive_deletes=True)
    members = db.relationship('Member', back_populates='club', cascade='all, delete-orphan', passive_deletes=True)
    venues = db.relationship('Venue', back_populates='club', cascade='all, delete-orphan', passive_deletes=True)

    def to_dict(self):
        return {
            'id': self.id,
            'club_name': self.club_name,
            'address': self.address,
            'contact_number': self.contact_number,
            'email': self.email,
            'founded_year': self.founded_year,
        }

    def __repr__(self):
        return f"<Club id={self.id} name={self.club_name!r}>"


class Sport(db.Model):
    __tablename__ = 'sports'

    id = db.Column(db.Integer, primary_key=True)
    club_id = db.Column(db.Integer, db.ForeignKey('clubs.id', ondelete='CASCADE'), nullable=False)
    sport_name = db.Column(db.String(50), nullable=False)  # e.g. Football, Basketball
    rules = db.Column(db.Text, nullable=True)

    club = db.relationship('Club', back_populates='sports')
    teams = db.relationship('Team', back_populates='sport', cascade='all, delete-orphan', passive_deletes=True)
    tournaments = db.relationship('Tournament', back_populates='sport', cascade='all, delete-orphan', passive_deletes=True)

    __table_args__ = (
        db.UniqueConstraint('club_id', 'sport_name', name='uq_sports_club_sport_name'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'club_id': self.club_id,
            'sport_name': self.sport_name,
            'rules': self.rules,
        }

    def __repr__(self):
        return f"<Sport id={self.id} name={self.sport_name!r} club_id={self.club_id}>"


class Member(db.Model):
    __tablename__ = 'members'

    id = db.Column(db.Integer, primary_key=True)
    club_id = db.Column(db.Integer, db.ForeignKey('clubs.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(db.String(20), nullable=False)
    full_name = db.Column(db.String(100), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=True)
    gender = db.Column(db.String(10), nullable=True)
    contact_number = db.Column(db.String(20), nullable=True)
    join_date = db.Column(db.Date, default=date.today)
    is_active = db.Column(db.Boolean, default=True)

    club = db.relationship('Club', back_populates='members')
    # Coach and referee references are cleared, not cascaded
    coached_teams = db.relationship('Team', back_populates='coach', passive_deletes=True)
    refereed_matches = db.relationship('Match', back_populates='referee', passive_deletes=True)
    team_memberships = db.relationship('TeamPlayer', back_populates='member', cascade='all, delete-orphan', passive_deletes=True)

    __table_args__ = (
        db.CheckConstraint(in_clause('role', MemberRole), name='ck_members_role'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'club_id': self.club_id,
            'role': self.role,
            'full_name': self.full_name,
            'date_of_birth': _iso(self.date_of_birth),
            'gender': self.gender,
            'contact_number': self.contact_number,
            'join_date': _iso(self.join_date),
            'is_active': self.is_active,
        }

    def __repr__(self):
        return f"<Member id={self.id} name={self.full_name!r} role={self.role}>"


class Team(db.Model):
    __tablename__ = 'teams'

    id = db.Column(db.Integer, primary_key=True)
    sport_id = db.Column(db.Integer, db.ForeignKey('sports.id', ondelete='CASCADE'), nullable=False)
    team_name = db.Column(db.String(100), nullable=False)
    coach_id = db.Column(db.Integer, db.ForeignKey('members.id', ondelete='SET NULL'), nullable=True)
    created_date = db.Column(db.Date, default=date.today)

    sport = db.relationship('Sport', back_populates='teams')
    coach = db.relationship('Member', back_populates='coached_teams')
    players = db.relationship('TeamPlayer', back_populates='team', cascade='all, delete-orphan', passive_deletes=True)
    home_matches = db.relationship('Match', foreign_keys='Match.team1_id', back_populates='team1',
                                   cascade='all, delete-orphan', passive_deletes=True)
    away_matches = db.relationship('Match', foreign_keys='Match.team2_id', back_populates='team2',
                                   cascade='all, delete-orphan', passive_deletes=True)

    __table_args__ = (
        db.UniqueConstraint('sport_id', 'team_name', name='uq_teams_sport_team_name'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'sport_id': self.sport_id,
            'team_name': self.team_name,
            'coach_id': self.coach_id,
            'created_date': _iso(self.created_date),
        }

    def __repr__(self):
        return f"<Team id={self.id} name={self.team_name!r} sport_id={self.sport_id}>"


class TeamPlayer(db.Model):
    __tablename__ = 'team_players'

    id = db.Column(db.Integer, primary_key=True)
    team_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    member_id = db.Column(db.Integer, db.ForeignKey('members.id', ondelete='CASCADE'), nullable=False)
    position = db.Column(db.String(50), nullable=True)
    jersey_number = db.Column(db.Integer, nullable=True)
    joined_date = db.Column(db.Date, default=date.today)
    is_active = db.Column(db.Boolean, default=True)

    team = db.relationship('Team', back_populates='players')
    member = db.relationship('Member', back_populates='team_memberships')

    # Inactive players keep their number reserved
    __table_args__ = (
        db.UniqueConstraint('team_id', 'jersey_number', name='uq_team_players_team_jersey'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'team_id': self.team_id,
            'member_id': self.member_id,
            'position': self.position,
            'jersey_number': self.jersey_number,
            'joined_date': _iso(self.joined_date),
            'is_active': self.is_active,
        }

    def __repr__(self):
        return f"<TeamPlayer id={self.id} team_id={self.team_id} jersey={self.jersey_number}>"


class Tournament(db.Model):
    __tablename__ = 'tournaments'

    id = db.Column(db.Integer, primary_key=True)
    sport_id = db.Column(db.Integer, db.ForeignKey('sports.id', ondelete='CASCADE'), nullable=False)
    tournament_name = db.Column(db.String(100), nullable=False)
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    tournament_type = db.Column(db.String(50), nullable=True)  # e.g. League, Knockout
    status = db.Column(db.String(20), nullable=False, default=TournamentStatus.PLANNED.value)

    sport = db.relationship('Sport', back_populates='tournaments')
    matches = db.relationship('Match', back_populates='tournament', cascade='all, delete-orphan', passive_deletes=True)

    __table_args__ = (
        db.CheckConstraint(in_clause('status', TournamentStatus), name='ck_tournaments_status'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'sport_id': self.sport_id,
            'tournament_name': self.tournament_name,
            'start_date': _iso(self.start_date),
            'end_date': _iso(self.end_date),
            'tournament_type': self.tournament_type,
            'status': self.status,
        }

    def __repr__(self):
        return f"<Tournament id={self.id} name={self.tournament_name!r} status={self.status}>"


class Venue(db.Model):
    __tablename__ = 'venues'

    id = db.Column(db.Integer, primary_key=True)
    club_id = db.Column(db.Integer, db.ForeignKey('clubs.id', ondelete='CASCADE'), nullable=False)
    venue_name = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(255), nullable=True)
    capacity = db.Column(db.Integer, nullable=True)
    venue_type = db.Column(db.String(50), nullable=True)  # e.g. Stadium, Indoor Court
    availability_status = db.Column(db.String(20), nullable=False, default=VenueAvailability.AVAILABLE.value)

    club = db.relationship('Club', back_populates='venues')
    matches = db.relationship('Match', back_populates='venue', cascade='all, delete-orphan', passive_deletes=True)

    __table_args__ = (
        db.UniqueConstraint('club_id', 'venue_name', name='uq_venues_club_venue_name'),
        db.CheckConstraint(in_clause('availability_status', VenueAvailability), name='ck_venues_availability'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'club_id': self.club_id,
            'venue_name': self.venue_name,
            'location': self.location,
            'capacity': self.capacity,
            'venue_type': self.venue_type,
            'availability_status': self.availability_status,
        }

    def __repr__(self):
        return f"<Venue id={self.id} name={self.venue_name!r} club_id={self.club_id}>"


class Match(db.Model):
    __tablename__ = 'matches'

    id = db.Column(db.Integer, primary_key=True)
    tournament_id = db.Column(db.Integer, db.ForeignKey('tournaments.id', ondelete='CASCADE'), nullable=False)
    venue_id = db.Column(db.Integer, db.ForeignKey('venues.id', ondelete='CASCADE'), nullable=False)
    team1_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    team2_id = db.Column(db.Integer, db.ForeignKey('teams.id', ondelete='CASCADE'), nullable=False)
    referee_id = db.Column(db.Integer, db.ForeignKey('members.id', ondelete='SET NULL'), nullable=True)
    scheduled_at = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=MatchStatus.SCHEDULED.value)

    # Scores
    team1_score = db.Column(db.Integer, nullable=True)
    team2_score = db.Column(db.Integer, nullable=True)
    result = db.Column(db.Text, nullable=True)

    tournament = db.relationship('Tournament', back_populates='matches')
    venue = db.relationship('Venue', back_populates='matches')
    team1 = db.relationship('Team', foreign_keys=[team1_id], back_populates='home_matches')
    team2 = db.relationship('Team', foreign_keys=[team2_id], back_populates='away_matches')
    referee = db.relationship('Member', back_populates='refereed_matches')

    __table_args__ = (
        db.CheckConstraint('team1_id <> team2_id', name='ck_matches_distinct_teams'),
        db.CheckConstraint(in_clause('status', MatchStatus), name='ck_matches_status'),
        db.UniqueConstraint('tournament_id', 'venue_id', 'scheduled_at', name='uq_matches_tournament_venue_slot'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'tournament_id': self.tournament_id,
            'venue_id': self.venue_id,
            'team1_id': self.team1_id,
            'team2_id': self.team2_id,
            'referee_id': self.referee_id,
            'scheduled_at': _iso(self.scheduled_at),
            'status': self.status,
            'team1_score': self.team1_score,
            'team2_score': self.team2_score,
            'result': self.result,
        }

    def __repr__(self):
        return f"<Match id={self.id} tournament_id={self.tournament_id} {self.team1_id} vs {self.team2_id}>"


# Lookup indexes by owning entity
db.Index('ix_members_club_id', Member.club_id)
db.Index('ix_teams_sport_id', Team.sport_id)
db.Index('ix_matches_tournament_scheduled', Match.tournament_id, Match.scheduled_at)
db.Index('ix_team_players_team_id', TeamPlayer.team_id)


# Table order for reporting, owners first
ALL_MODELS = [Club, Sport, Member, Team, TeamPlayer, Tournament, Venue, Match]
