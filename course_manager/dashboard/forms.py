"""
Course Form Parsing

Turns the dashboard POST body into one of three typed actions so the route
can dispatch on the action type instead of comparing strings.
"""

from dataclasses import dataclass
from datetime import datetime

from course_manager.models import COURSE_STATUSES
from course_manager.services.datetimes import combine_date_time


class CourseFormError(ValueError):
    """Raised when the submitted course form cannot be turned into an action."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class CourseFields:
    name: str
    start_datetime: datetime
    end_datetime: datetime
    status: str = 'active'

    def as_dict(self):
        return {
            'name': self.name,
            'start_datetime': self.start_datetime,
            'end_datetime': self.end_datetime,
            'status': self.status,
        }


@dataclass(frozen=True)
class CreateCourse:
    fields: CourseFields


@dataclass(frozen=True)
class UpdateCourse:
    course_id: int
    fields: CourseFields


@dataclass(frozen=True)
class DeleteCourse:
    course_id: int


# Largest value a 64-bit signed INTEGER column can hold
MAX_ID = 2 ** 63 - 1


def parse_positive_id(value):
    """Return value as a positive int that fits an INTEGER column, or None."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if 0 < number <= MAX_ID else None


def _parse_fields(form):
    name = form.get('name', '').strip()
    parts = [form.get(key, '').strip() for key in ('start_date', 'start_time', 'end_date', 'end_time')]
    if not name or not all(parts):
        raise CourseFormError('All fields are required.')

    start_date, start_time, end_date, end_time = parts
    try:
        start = combine_date_time(start_date, start_time)
        end = combine_date_time(end_date, end_time)
    except ValueError:
        raise CourseFormError('Invalid date or time.')

    status = form.get('status', '').strip() or 'active'
    if status not in COURSE_STATUSES:
        raise CourseFormError('Invalid course status.')

    return CourseFields(name=name, start_datetime=start, end_datetime=end, status=status)


def parse_course_action(form):
    """Build a CreateCourse, UpdateCourse or DeleteCourse from a submitted form.

    Raises:
        CourseFormError: with the user-facing message when the form is invalid.
    """
    action = form.get('action', '')

    if action == 'create':
        return CreateCourse(_parse_fields(form))

    if action == 'update':
        fields = _parse_fields(form)
        course_id = parse_positive_id(form.get('id'))
        if course_id is None:
            raise CourseFormError('Invalid course ID for update.')
        return UpdateCourse(course_id, fields)

    if action == 'delete':
        course_id = parse_positive_id(form.get('id'))
        if course_id is None:
            raise CourseFormError('Invalid course ID for deletion.')
        return DeleteCourse(course_id)

    raise CourseFormError('Unknown action.')
