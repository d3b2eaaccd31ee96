"""
Services Package

Exports all services for easy importing.
"""

from course_manager.services.users import create_user, find_user_by_email, email_exists, get_user
from course_manager.services.courses import (
    SORT_OPTIONS,
    get_all_courses,
    count_courses,
    get_course,
    create_course,
    update_course,
    delete_course,
)
from course_manager.services.datetimes import combine_date_time, split_datetime
from course_manager.services.recaptcha import verify_recaptcha, recaptcha_enabled

__all__ = [
    'create_user',
    'find_user_by_email',
    'email_exists',
    'get_user',
    'SORT_OPTIONS',
    'get_all_courses',
    'count_courses',
    'get_course',
    'create_course',
    'update_course',
    'delete_course',
    'combine_date_time',
    'split_datetime',
    'verify_recaptcha',
    'recaptcha_enabled',
]
