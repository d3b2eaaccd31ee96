"""
Course Manager - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

from flask import Flask, render_template
from course_manager.extensions import db, login_manager
from course_manager.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from course_manager.logging_setup import configure_logging
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = None

    # Session data is stored server-side, keyed by the cookie's session id
    from course_manager.sessions import DatabaseSessionInterface
    app.session_interface = DatabaseSessionInterface()

    # Register blueprints
    from course_manager.auth import auth_bp
    from course_manager.dashboard import dashboard_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)

    @app.context_processor
    def inject_site_settings():
        """Inject the page title and reCAPTCHA site key into templates."""
        return dict(app_title=app.config['APP_TITLE'],
                    recaptcha_site_key=app.config['RECAPTCHA_SITE_KEY'])

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from course_manager.services import get_user
        return get_user(int(user_id))

    @app.errorhandler(404)
    def page_not_found(error):
        return render_template('errors/404.html'), 404

    from course_manager.database import init_database, register_database_error_handler
    register_database_error_handler(app)

    from course_manager.commands import register_commands
    register_commands(app)

    # Create database tables
    init_database(app)

    return app
