import os
import logging
from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError

from .config import config
from .models import db
from .registry import ClubRegistry

logger = logging.getLogger(__name__)


def create_app(config_name: str = None) -> Flask:
    """Application factory hosting the club schema."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    # Initialize extensions
    db.init_app(app)

    # Create tables
    with app.app_context():
        db.create_all()

    # Store the registry on app for access by callers
    app.registry = ClubRegistry()

    register_routes(app)

    return app


def register_routes(app: Flask):
    """Register the health check; row operations go through app.registry."""

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            db.session.execute(db.text('SELECT 1'))
            counts = app.registry.table_counts()
            db_ok = True
        except SQLAlchemyError as e:
            logger.error(f"Health check database error: {e}")
            db.session.rollback()
            counts = {}
            db_ok = False

        status = 'healthy' if db_ok else 'unhealthy'
        code = 200 if db_ok else 503

        return jsonify({
            'status': status,
            'database': 'connected' if db_ok else 'disconnected',
            'tables': counts
        }), code
