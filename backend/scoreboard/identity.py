"""Cookie identity for HTTP requests and Socket.IO connections.

The signed ``user_id`` cookie is Flask-Login's remember cookie under another
name: ``"<id>|<hmac>"`` keyed by ``SECRET_KEY``. A missing, tampered or stale
cookie is never an error; the caller simply gets a freshly created user.
"""
from flask import current_app, request
from flask_login import current_user, login_user
from scoreboard import db, login_manager
from scoreboard.errors import AuthResolutionError
from scoreboard.models import User


def parse_user_id(raw) -> int:
    try:
        user_id = int(raw)
    except (TypeError, ValueError):
        raise AuthResolutionError(f'Unreadable user id {raw!r}')
    if user_id <= 0:
        raise AuthResolutionError(f'Unreadable user id {raw!r}')
    return user_id


@login_manager.user_loader
def load_user(user_id):
    try:
        return db.session.get(User, parse_user_id(user_id))
    except AuthResolutionError as exc:
        current_app.logger.info(f"[auth] {exc}; treating request as unauthenticated")
        return None


def find_verified_user() -> User:
    """Return the user behind the current request, creating one if needed.

    Flask-Login resolves the session or the signed cookie. When that yields no
    user a new row is created and logged in with ``remember=True`` so the
    ``user_id`` cookie is written on the way out. Over Socket.IO the login only
    lands in the connection's own session.
    """
    if current_user.is_authenticated:
        return current_user._get_current_object()

    cookie_name = current_app.config.get('REMEMBER_COOKIE_NAME', 'user_id')
    if request.cookies.get(cookie_name):
        current_app.logger.info("[auth] identity cookie did not resolve to a user; issuing a new one")

    user = User()
    db.session.add(user)
    db.session.commit()
    login_user(user, remember=True)
    current_app.logger.info(f"[auth] created user={user.id}")
    return user


def _set_current_user():
    if request.method == 'OPTIONS':
        return None
    find_verified_user()
    return None


def init_identity(app):
    app.before_request(_set_current_user)
