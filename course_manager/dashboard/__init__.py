"""
Dashboard Blueprint

Course listing and the create/update/delete endpoint.
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from course_manager.dashboard import routes  # noqa: E402, F401
