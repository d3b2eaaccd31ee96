"""
Dashboard Services

Listing and edit-form preparation for the dashboard view.
"""

import logging

from course_manager.dashboard.forms import CreateCourse, UpdateCourse, DeleteCourse, parse_positive_id
from course_manager.services import (
    get_all_courses,
    get_course,
    create_course,
    update_course,
    delete_course,
    split_datetime,
)

logger = logging.getLogger(__name__)

DEFAULT_LISTING_SORT = 'date_desc'


def get_listing(sort, status):
    """Get the courses for the table along with the effective sort and filter."""
    sort = sort or DEFAULT_LISTING_SORT
    status = status or ''
    return get_all_courses(sort, status), sort, status


def build_edit_course(edit_id):
    """Get the course to prefill the edit form with, or None.

    Timestamps are split into separate date and time fields. A value that
    cannot be parsed leaves all four fields empty.
    """
    course_id = parse_positive_id(edit_id)
    if course_id is None:
        return None

    course = get_course(course_id)
    if course is None:
        return None

    edit_course = {
        'id': course.id,
        'name': course.name,
        'status': course.status,
    }
    try:
        edit_course['start_date'], edit_course['start_time'] = split_datetime(course.start_datetime)
        edit_course['end_date'], edit_course['end_time'] = split_datetime(course.end_datetime)
    except (TypeError, ValueError) as e:
        logger.warning('Datetime parsing error for course %s: %s', course.id, e)
        edit_course.update(start_date='', start_time='', end_date='', end_time='')
    return edit_course


def apply_course_action(action):
    """Run a parsed course action. Returns a (category, message) flash pair."""
    if isinstance(action, CreateCourse):
        if create_course(action.fields.as_dict()):
            return 'success', 'Course created successfully.'
        return 'error', 'Failed to create course. Please try again.'

    if isinstance(action, UpdateCourse):
        if update_course(action.course_id, action.fields.as_dict()):
            return 'success', 'Course updated successfully.'
        return 'error', 'Failed to update course. Please try again.'

    if isinstance(action, DeleteCourse):
        if delete_course(action.course_id):
            return 'success', 'Course deleted successfully.'
        return 'error', 'Failed to delete course. Please try again.'

    raise TypeError(f'Unsupported course action: {action!r}')
