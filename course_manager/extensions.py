"""
Flask Extensions

Login state is kept by Flask-Login inside the server-side session, so the
client only ever holds an opaque session id.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()
