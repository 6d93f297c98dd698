#!/usr/bin/env python3
"""
Database management script.

Usage:
    python manage_db.py init      # Create all tables (default)
    python manage_db.py seed      # Create tables and insert the sample dataset
    python manage_db.py reset     # Drop and recreate all tables
    python manage_db.py counts    # Print row counts per table
"""
import os
import sys
import logging

# Add current directory to path so we can import clubhouse
sys.path.append(os.getcwd())

from clubhouse.app import create_app
from clubhouse.errors import ConstraintViolation
from clubhouse.models import db
from clubhouse.seed import seed_sample_data


def init(app):
    # create_app already ran create_all
    print("✓ Tables created.")


def seed(app):
    try:
        ids = seed_sample_data(app.registry)
    except ConstraintViolation as e:
        print(f"Error seeding sample data: {e}")
        sys.exit(1)
    print(f"✓ Sample data seeded (club id {ids['club']}).")


def reset(app):
    db.drop_all()
    db.create_all()
    print("✓ Tables dropped and recreated.")


def counts(app):
    for table, count in app.registry.table_counts().items():
        print(f"{table:<14} {count}")


COMMANDS = {
    'init': init,
    'seed': seed,
    'reset': reset,
    'counts': counts,
}


if __name__ == '__main__':
    command = sys.argv[1] if len(sys.argv) > 1 else 'init'

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Usage: python manage_db.py [{'|'.join(COMMANDS)}]")
        sys.exit(1)

    app = create_app()
    logging.basicConfig(level=app.config['LOG_LEVEL'])
    with app.app_context():
        COMMANDS[command](app)
