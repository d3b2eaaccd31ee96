"""
Auth Blueprint

Registration, login, logout and the session check endpoint.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from course_manager.auth import routes  # noqa: E402, F401
