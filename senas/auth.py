"""Guest sessions: password-less identities backed by a signed cookie.

A session is a row in ``guest_users`` plus an HS256 token carrying
``userId``, ``username`` and ``avatarIndex``. The token travels in an
HTTP-only cookie; Flask-Login's request loader turns it back into
``current_user`` on every request.
"""

import time

import jwt
from flask import current_app, jsonify, redirect, request, url_for

from senas import db, login_manager
from senas.models import GuestUser

JWT_ALGORITHM = 'HS256'


def _jwt_secret():
    secret = current_app.config.get('GUEST_SESSION_JWT_SECRET')
    if not secret:
        raise RuntimeError('JWT secret not configured')
    return secret


def pick_avatar_index(rng=None) -> int:
    """Uniform pick in 1..AVATAR_COUNT. Purely cosmetic."""
    rng = rng or current_app.extensions['avatar_rng']
    return rng.randint(1, int(current_app.config.get('AVATAR_COUNT', 10)))


def issue_guest_session(username: str):
    """Insert a guest user and return ``(user, token)``."""
    secret = _jwt_secret()
    user = GuestUser(username=username, profile_icon_number=pick_avatar_index())
    db.session.add(user)
    db.session.commit()

    ttl = int(current_app.config.get('GUEST_SESSION_TTL_SEC', 3600))
    payload = dict(user.to_dict(), exp=int(time.time()) + ttl)
    token = jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
    current_app.logger.info(f"[guest-session] issued user={user.id} avatar={user.profile_icon_number}")
    return user, token


def set_session_cookie(response, token):
    response.set_cookie(
        current_app.config.get('GUEST_SESSION_COOKIE', 'guest_session_token'),
        token,
        max_age=int(current_app.config.get('GUEST_SESSION_TTL_SEC', 3600)),
        httponly=True,
        path='/',
    )
    return response


def decode_session_token(token):
    """Return the token claims, or None if the token is unusable."""
    if not token:
        return None
    secret = current_app.config.get('GUEST_SESSION_JWT_SECRET')
    if not secret:
        return None
    try:
        return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        current_app.logger.debug("[guest-session] expired token")
    except jwt.InvalidTokenError as exc:
        current_app.logger.debug(f"[guest-session] rejected token: {exc}")
    return None


@login_manager.request_loader
def load_guest_from_cookie(req):
    claims = decode_session_token(req.cookies.get(current_app.config.get('GUEST_SESSION_COOKIE', 'guest_session_token')))
    if not claims:
        return None
    try:
        user_id = int(claims.get('userId'))
    except (TypeError, ValueError):
        return None
    return db.session.get(GuestUser, user_id)


@login_manager.unauthorized_handler
def unauthorized():
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Guest session required'}), 401
    return redirect(url_for('pages.home'))
