"""
Models Package

Exports all models for easy importing.
"""

from course_manager.models.user import User
from course_manager.models.course import Course, COURSE_STATUSES
from course_manager.models.session import SessionRecord

__all__ = ['User', 'Course', 'COURSE_STATUSES', 'SessionRecord']
