"""
Configuration settings for the Course Manager application
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

# Values in a local .env file become environment variables
load_dotenv()


class Config:
    """Flask application configuration"""

    APP_TITLE = os.environ.get('APP_TITLE') or 'Course Manager'

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'course_manager.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions: the cookie only carries the session id
    SESSION_COOKIE_NAME = 'course_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=int(os.environ.get('SESSION_LIFETIME_HOURS', '8')))
    # Chance that storing a new session also deletes expired rows
    SESSION_PRUNE_PROBABILITY = float(os.environ.get('SESSION_PRUNE_PROBABILITY', '0.01'))

    # Werkzeug hashing method for stored passwords
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256'

    # Google reCAPTCHA v3 (verification is skipped without a secret key)
    RECAPTCHA_SITE_KEY = os.environ.get('RECAPTCHA_SITE_KEY', '')
    RECAPTCHA_SECRET_KEY = os.environ.get('RECAPTCHA_SECRET_KEY', '')
    RECAPTCHA_VERIFY_URL = 'https://www.google.com/recaptcha/api/siteverify'
    RECAPTCHA_MIN_SCORE = float(os.environ.get('RECAPTCHA_MIN_SCORE', '0.5'))
    RECAPTCHA_TIMEOUT = 6

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    RECAPTCHA_SITE_KEY = ''
    RECAPTCHA_SECRET_KEY = ''
    SESSION_PRUNE_PROBABILITY = 0
    LOG_LEVEL = 'DEBUG'
