"""
Auth Routes

User authentication routes using Flask-Login and server-side sessions.
"""

import logging

from email_validator import validate_email, EmailNotValidError
from flask import render_template, request, redirect, url_for, flash, session, jsonify, current_app
from flask_login import login_user, logout_user, current_user
from werkzeug.security import generate_password_hash, check_password_hash
from course_manager.auth import auth_bp
from course_manager.services import create_user, email_exists, find_user_by_email, verify_recaptcha

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password.'
CAPTCHA_FAILED = 'Human verification failed. Please try again.'


def is_valid_email(email):
    """Check that an address is RFC-shaped, without any DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


@auth_bp.route('/', methods=['GET', 'POST'])
@auth_bp.route('/auth/login', methods=['GET', 'POST'])
@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    errors = {}
    general_error = None

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        # Both fields are checked so every problem is reported at once
        if not email or not is_valid_email(email):
            errors['email'] = 'Please enter a valid email address.'
        if not password:
            errors['password'] = 'Password is required.'

        if not errors and not verify_recaptcha(request.form.get('recaptcha_token'),
                                               request.remote_addr, action='login'):
            general_error = CAPTCHA_FAILED

        if not errors and not general_error:
            user = find_user_by_email(email)
            if user and check_password_hash(user.password, password):
                # New session id before the identity is stored (session fixation)
                session.regenerate()
                login_user(user)
                session['user_email'] = user.email
                logger.info('User %s logged in', user.id)
                return redirect(url_for('dashboard.index'))

            # Same message whether the account exists or not
            logger.info('Failed login attempt for %s', email)
            general_error = INVALID_CREDENTIALS

    return render_template('auth/login.html', errors=errors, general_error=general_error)


@auth_bp.route('/auth/register', methods=['GET', 'POST'])
@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    errors = {}
    general_error = None
    form = {field: request.form.get(field, '').strip()
            for field in ('firstname', 'lastname', 'school', 'email')}

    if request.method == 'POST':
        password = request.form.get('password', '')

        if not form['firstname'] or not form['lastname'] or not form['email'] or not password:
            general_error = 'First name, last name, email, and password are required.'
        elif not is_valid_email(form['email']):
            errors['email'] = 'Please enter a valid email address.'
        elif not verify_recaptcha(request.form.get('recaptcha_token'),
                                  request.remote_addr, action='register'):
            general_error = CAPTCHA_FAILED
        elif email_exists(form['email']):
            general_error = 'Email already registered.'
        else:
            hashed_password = generate_password_hash(
                password, method=current_app.config['PASSWORD_HASH_METHOD'])
            # The unique index still rejects a concurrent duplicate here
            if create_user(form['firstname'], form['lastname'], form['school'],
                           form['email'], hashed_password):
                flash('Registration successful! Please login.', 'success')
                return redirect(url_for('auth.login'))
            general_error = 'Registration failed. Please try again.'

    return render_template('auth/register.html', errors=errors, general_error=general_error, form=form)


@auth_bp.route('/auth/logout')
@auth_bp.route('/logout')
def logout():
    """Destroy the session entry and return to the login page"""
    logout_user()
    session.clear()
    return redirect(url_for('auth.login'))


@auth_bp.route('/auth/check')
def check():
    """Report whether the current session is authenticated"""
    return jsonify(authenticated=current_user.is_authenticated)
