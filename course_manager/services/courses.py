"""
Course Service

Listing, look-up and persistence of course records. Every statement is built
through SQLAlchemy so values are always bound as parameters.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from course_manager.extensions import db
from course_manager.models import Course

logger = logging.getLogger(__name__)

DEFAULT_SORT = 'a_z'

# Sort key -> (label, ordering)
SORT_OPTIONS = {
    'a_z': ('A-Z (Name)', (Course.name.asc(), Course.id.asc())),
    'z_a': ('Z-A (Name)', (Course.name.desc(), Course.id.desc())),
    'date_desc': ('Date (Newest First)', (Course.created_at.desc(), Course.id.desc())),
    'date_asc': ('Date (Oldest First)', (Course.created_at.asc(), Course.id.asc())),
}


def _listing_query(status):
    query = Course.query
    if status:
        query = query.filter(Course.status == status)
    return query


def get_all_courses(sort=DEFAULT_SORT, status=''):
    """Return courses filtered by status and ordered by the given sort key.

    Unknown sort keys fall back to name ascending; an empty status means
    no filter.
    """
    _, ordering = SORT_OPTIONS.get(sort, SORT_OPTIONS[DEFAULT_SORT])
    return _listing_query(status).order_by(*ordering).all()


def count_courses(status=''):
    return _listing_query(status).count()


def get_course(course_id):
    return db.session.get(Course, course_id)


def create_course(data):
    """Insert a course from a dict with name, start_datetime, end_datetime and optional status."""
    course = Course(
        name=data['name'],
        start_datetime=data['start_datetime'],
        end_datetime=data['end_datetime'],
        status=data.get('status') or 'active',
    )
    try:
        db.session.add(course)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not create course %r', data.get('name'))
        return False
    return True


def update_course(course_id, data):
    """Replace the mutable fields of an existing course. False if it does not exist."""
    course = get_course(course_id)
    if course is None:
        logger.info('Update skipped, course %s not found', course_id)
        return False

    course.name = data['name']
    course.start_datetime = data['start_datetime']
    course.end_datetime = data['end_datetime']
    course.status = data.get('status') or 'active'
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not update course %s', course_id)
        return False
    return True


def delete_course(course_id):
    """Physically delete a course. False if it was already gone."""
    course = get_course(course_id)
    if course is None:
        logger.info('Delete skipped, course %s not found', course_id)
        return False

    try:
        db.session.delete(course)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not delete course %s', course_id)
        return False
    return True
