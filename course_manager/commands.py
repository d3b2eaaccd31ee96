"""
CLI Commands

``flask init-db``, ``flask create-user`` and ``flask prune-sessions``.
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from werkzeug.security import generate_password_hash
from course_manager.extensions import db
from course_manager.services import create_user, email_exists
from course_manager.sessions import prune_expired_sessions


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all database tables."""
    db.create_all()
    click.echo('Database tables created')


@click.command('create-user')
@click.argument('email')
@click.option('--firstname', prompt=True)
@click.option('--lastname', prompt=True)
@click.option('--school', default='')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@with_appcontext
def create_user_command(email, firstname, lastname, school, password):
    """Create a user account."""
    if email_exists(email):
        raise click.ClickException(f'Email already registered: {email}')

    hashed_password = generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD'])
    if not create_user(firstname, lastname, school, email, hashed_password):
        raise click.ClickException('Could not create user, see the log for details')
    click.echo(f'Created user {email}')


@click.command('prune-sessions')
@with_appcontext
def prune_sessions_command():
    """Delete expired server-side sessions."""
    removed = prune_expired_sessions()
    click.echo(f'Removed {removed} expired session(s)')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)
    app.cli.add_command(prune_sessions_command)
