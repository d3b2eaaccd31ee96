"""
User Service

Account creation and look-up queries.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from course_manager.extensions import db
from course_manager.models import User

logger = logging.getLogger(__name__)


def create_user(firstname, lastname, school, email, password_hash):
    """Insert a new user row. Returns False when the store rejects it."""
    user = User(
        firstname=firstname,
        lastname=lastname,
        school=school or None,
        email=email,
        password=password_hash,
    )
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not create user %s', email)
        return False
    return True


def find_user_by_email(email):
    """Return the user with exactly this email, or None."""
    return User.query.filter_by(email=email).first()


def email_exists(email):
    return find_user_by_email(email) is not None


def get_user(user_id):
    return db.session.get(User, user_id)
