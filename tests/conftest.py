"""
Pytest configuration and fixtures for clubhouse tests.
"""
import os
import sys
from datetime import datetime

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from clubhouse.app import create_app
from clubhouse.models import db
from clubhouse.registry import ClubRegistry
from clubhouse.seed import seed_sample_data


# The sample data's self-match: one team scheduled against itself
SELF_MATCH = {
    'tournament_id': 1,
    'venue_id': 1,
    'team1_id': 1,
    'team2_id': 1,
    'scheduled_at': datetime(2024, 3, 15, 18, 0),
}


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app):
    """Create database session for testing."""
    with app.app_context():
        # Clear all tables before each test
        db.session.remove()

        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()

        yield db.session

        db.session.rollback()


@pytest.fixture
def registry(db_session):
    """ClubRegistry bound to a clean database."""
    return ClubRegistry()


@pytest.fixture
def seeded(registry):
    """Insert the sample dataset; returns the created ids."""
    return seed_sample_data(registry)


@pytest.fixture
def self_match():
    return dict(SELF_MATCH)


@pytest.fixture
def second_team(registry, seeded):
    """A second football team so matches can be scheduled."""
    team = registry.create_team(seeded['sports']['football'], 'Hillside United')
    return team.id


@pytest.fixture
def sample_match(registry, seeded, second_team):
    """A scheduled match between the seeded team and the second team."""
    match = registry.create_match(
        tournament_id=seeded['tournament'],
        venue_id=seeded['venue'],
        team1_id=seeded['team'],
        team2_id=second_team,
        scheduled_at=datetime(2024, 3, 15, 18, 0),
        referee_id=seeded['members']['referee']
    )
    return match.id
