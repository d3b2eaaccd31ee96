"""
Course Model
"""

from course_manager.extensions import db

COURSE_STATUSES = ('active', 'inactive')


class Course(db.Model):
    """A scheduled course managed from the dashboard"""
    __tablename__ = 'courses'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    start_datetime = db.Column(db.DateTime, nullable=False)
    end_datetime = db.Column(db.DateTime, nullable=False)
    status = db.Column(db.String(20), nullable=False, default='active')
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp(), index=True)

    def __repr__(self):
        return f'<Course {self.name} ({self.status})>'
