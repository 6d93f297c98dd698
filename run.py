#!/usr/bin/env python3
"""
Entry point for the Clubhouse service.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development, testing or production (default: development)
    PORT: Port to run on (default: 5000)
    DATABASE_URL: SQLAlchemy database URL (default: sqlite:///clubhouse.db)
    LOG_LEVEL: Logging level (default: INFO, DEBUG in development)
"""
import os
import logging


def run_service():
    """Run the clubhouse service."""
    from clubhouse.app import create_app

    app = create_app()
    logging.basicConfig(level=app.config['LOG_LEVEL'])

    port = int(os.getenv('PORT', 5000))
    debug = app.config.get('DEBUG', False)

    print(f"Starting Clubhouse on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=debug)


if __name__ == '__main__':
    run_service()
