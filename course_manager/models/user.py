"""
User Model
"""

from flask_login import UserMixin
from course_manager.extensions import db


class User(UserMixin, db.Model):
    """User account used for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    firstname = db.Column(db.String(100), nullable=False)
    lastname = db.Column(db.String(100), nullable=False)
    school = db.Column(db.String(255))
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    # Salted one-way hash, never the plaintext
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def __repr__(self):
        return f'<User {self.email}>'
