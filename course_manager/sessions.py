"""
Server-side Sessions

Session data lives in the ``sessions`` table; the cookie only carries an
opaque, random session id. Unlike Flask's signed-cookie sessions, the id can
be rotated after login and the stored entry destroyed on logout.
"""

import logging
import random
import secrets
from datetime import datetime, timezone

from flask.json.tag import TaggedJSONSerializer
from flask.sessions import SessionInterface, SessionMixin
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from werkzeug.datastructures import CallbackDict

from course_manager.extensions import db
from course_manager.models import SessionRecord

logger = logging.getLogger(__name__)


def generate_sid():
    return secrets.token_urlsafe(32)


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ServerSession(CallbackDict, SessionMixin):
    """Session dict that tracks modification and knows its store id."""

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True

        super().__init__(initial, on_update)
        self.sid = sid or generate_sid()
        self.new = new
        self.modified = False
        self.discarded_sids = []

    def regenerate(self):
        """Switch to a fresh session id, keeping the data.

        The entry stored under the previous id is deleted when the session
        is saved.
        """
        if not self.new:
            self.discarded_sids.append(self.sid)
        self.sid = generate_sid()
        self.new = True
        self.modified = True


class DatabaseSessionInterface(SessionInterface):
    """Flask session interface backed by the SessionRecord model."""

    session_class = ServerSession
    serializer = TaggedJSONSerializer()

    def open_session(self, app, request):
        sid = request.cookies.get(self.get_cookie_name(app))
        if not sid:
            return self.session_class(new=True)

        try:
            record = db.session.get(SessionRecord, sid)
        except OperationalError:
            # Fall back to a null session; the request fails on its first query
            logger.exception('Session store unavailable')
            db.session.rollback()
            return None

        # Unknown ids are never adopted, a new one is issued instead
        if record is None or record.is_expired():
            return self.session_class(new=True)

        try:
            data = self.serializer.loads(record.data)
        except ValueError:
            logger.warning('Discarding unreadable session %s...', sid[:8])
            return self.session_class(new=True)
        return self.session_class(data, sid=sid)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        secure = self.get_cookie_secure(app)
        samesite = self.get_cookie_samesite(app)
        httponly = self.get_cookie_httponly(app)

        if session.accessed:
            response.vary.add('Cookie')

        if not session.modified:
            return

        try:
            for sid in session.discarded_sids:
                SessionRecord.query.filter_by(id=sid).delete()

            if not session:
                SessionRecord.query.filter_by(id=session.sid).delete()
                db.session.commit()
                # A session loaded from storage came with a cookie to remove
                if not session.new or session.discarded_sids:
                    response.delete_cookie(name, domain=domain, path=path, secure=secure,
                                           samesite=samesite, httponly=httponly)
                return

            expires = self.get_expiration_time(app, session)
            stored_until = expires.replace(tzinfo=None) if expires else \
                _utcnow() + app.permanent_session_lifetime

            record = db.session.get(SessionRecord, session.sid)
            if record is None:
                if random.random() < app.config.get('SESSION_PRUNE_PROBABILITY', 0):
                    removed = _delete_expired(_utcnow())
                    logger.debug('Pruned %d expired session(s)', removed)
                record = SessionRecord(id=session.sid)
                db.session.add(record)
            record.data = self.serializer.dumps(dict(session))
            record.expires_at = stored_until
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Could not persist session %s...', session.sid[:8])
            raise

        session.discarded_sids = []
        response.set_cookie(name, session.sid, expires=expires, httponly=httponly,
                            domain=domain, path=path, secure=secure, samesite=samesite)


def _delete_expired(now):
    return SessionRecord.query.filter(SessionRecord.expires_at <= now).delete()


def prune_expired_sessions(now=None):
    """Delete expired session rows. Returns the number removed."""
    removed = _delete_expired(now or _utcnow())
    db.session.commit()
    return removed
