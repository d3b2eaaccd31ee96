"""
Date/Time Helpers

Conversion between the split date and time form fields and the combined
timestamps stored on a course.
"""

from datetime import datetime

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMATS = ('%H:%M', '%H:%M:%S')
FORM_TIME_FORMAT = '%H:%M'


def combine_date_time(date_str, time_str):
    """Combine a ``YYYY-MM-DD`` date and an ``HH:MM`` time into one datetime.

    Raises:
        ValueError: if either part is empty or malformed.
    """
    date_str = (date_str or '').strip()
    time_str = (time_str or '').strip()
    if not date_str or not time_str:
        raise ValueError('Both date and time are required')

    day = datetime.strptime(date_str, DATE_FORMAT).date()
    for fmt in TIME_FORMATS:
        try:
            moment = datetime.strptime(time_str, fmt).time()
            break
        except ValueError:
            continue
    else:
        raise ValueError(f'Malformed time value: {time_str!r}')

    return datetime.combine(day, moment)


def split_datetime(value):
    """Split a datetime (or ISO-like string) into form date and time strings.

    Returns ``('', '')`` for empty values and raises ValueError when a string
    cannot be parsed.
    """
    if value is None or value == '':
        return '', ''
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    return value.strftime(DATE_FORMAT), value.strftime(FORM_TIME_FORMAT)
