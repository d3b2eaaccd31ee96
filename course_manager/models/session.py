"""
Session Record Model
"""

from datetime import datetime, timezone

from course_manager.extensions import db


class SessionRecord(db.Model):
    """Server-side storage for one client session, keyed by the cookie id"""
    __tablename__ = 'sessions'

    id = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.Text, nullable=False, default='')
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    def is_expired(self, now=None):
        now = now or datetime.now(timezone.utc).replace(tzinfo=None)
        return self.expires_at <= now

    def __repr__(self):
        return f'<SessionRecord {self.id[:8]}... expires {self.expires_at}>'
