import functools
import re

from flask import (
    Blueprint, flash, g, redirect, render_template, request, session, url_for
)
from werkzeug.security import check_password_hash, generate_password_hash

from .db import get_db

import logging
logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__, url_prefix='/auth')


def is_valid_username(username):
    """3-20 characters, alphanumeric and underscores only."""
    return re.fullmatch(r'[a-zA-Z0-9_]{3,20}', username) is not None


def login_required(view):
    """View decorator that redirects anonymous users to the login page."""

    @functools.wraps(view)
    def wrapped_view(**kwargs):
        if g.user is None:
            return redirect(url_for('auth.login'))

        return view(**kwargs)

    return wrapped_view


@bp.before_app_request
def load_logged_in_user():
    """Load the user stored in the session into ``g.user``."""
    user_id = session.get('user_id')

    if user_id is None:
        g.user = None
    else:
        g.user = get_db().execute(
            'SELECT id, username, image FROM user WHERE id = ?', (user_id,)
        ).fetchone()


@bp.route('/register', methods=('GET', 'POST'))
def register():
    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')
        image = request.form.get('image', '').strip() or None
        db = get_db()
        error = None

        if not username:
            error = 'Username is required.'
        elif not is_valid_username(username):
            error = 'Username must be 3-20 letters, digits or underscores.'
        elif not password:
            error = 'Password is required.'

        if error is None:
            try:
                db.execute(
                    'INSERT INTO user (username, password, image) VALUES (?, ?, ?)',
                    (username, generate_password_hash(password), image),
                )
                db.commit()
            except db.IntegrityError:
                error = f"User {username} is already registered."
            else:
                logger.info("Registered new user %s", username)
                return redirect(url_for('auth.login'))

        logger.warning("Registration failed: %s", error)
        flash(error)

    return render_template('auth/register.html')


@bp.route('/login', methods=('GET', 'POST'))
def login():
    if request.method == 'POST':
        username = request.form.get('username', '')
        password = request.form.get('password', '')
        error = None

        user = get_db().execute(
            'SELECT * FROM user WHERE username = ?', (username,)
        ).fetchone()

        if user is None or not check_password_hash(user['password'], password):
            error = 'Incorrect username or password.'
            logger.warning("Login failed for %s", username)

        if error is None:
            session.clear()
            session['user_id'] = user['id']
            logger.info("User logged in: %s", user['username'])
            return redirect(url_for('index'))

        flash(error)

    return render_template('auth/login.html')


@bp.route('/logout')
def logout():
    logger.info("User logged out: %s", g.user['username'] if g.user else 'Unknown')
    session.clear()
    return redirect(url_for('index'))
