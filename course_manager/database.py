"""
Database Gateway

Creates the schema at boot and turns a lost database connection into a
diagnostic page for the current request.
"""

import logging
import os

from flask import render_template
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from werkzeug.exceptions import InternalServerError
from course_manager.extensions import db

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(uri):
    url = make_url(uri)
    if url.get_backend_name() == 'sqlite' and url.database and url.database != ':memory:':
        directory = os.path.dirname(os.path.abspath(url.database))
        os.makedirs(directory, exist_ok=True)


def init_database(app):
    """Create all tables. A connection failure is logged, not raised."""
    _ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
    with app.app_context():
        try:
            db.create_all()
        except OperationalError:
            logger.exception('Database connection failed, tables were not created')
            return False
    return True


def _database_error_page(app, error):
    try:
        db.session.rollback()
    except SQLAlchemyError:
        logger.debug('Rollback after database error failed')
    orig = getattr(error, 'orig', None)
    detail = str(orig) if app.debug and orig is not None else None
    return render_template('errors/database.html', detail=detail), 500


def register_database_error_handler(app):
    """Render the database error page whenever a request loses the database."""

    @app.errorhandler(OperationalError)
    def database_unavailable(error):
        logger.exception('Database error while handling request: %s', error)
        return _database_error_page(app, error)

    @app.errorhandler(InternalServerError)
    def internal_error(error):
        # Failures outside the view, such as saving the session, arrive here wrapped
        cause = error.original_exception
        if isinstance(cause, SQLAlchemyError):
            logger.error('Database error while finishing request: %s', cause)
            return _database_error_page(app, cause)
        return error
