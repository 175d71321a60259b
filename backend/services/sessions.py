"""Cookie-backed login sessions: token -> email rows in the sessions table."""
import functools
import logging
import uuid
from typing import Optional

from flask import current_app, g, redirect, request, url_for

from extensions import db
from models import Session, User

logger = logging.getLogger(__name__)


def _cookie_name() -> str:
    return current_app.config.get("SESSION_COOKIE", "SESSIONID")


def start_session(user: User) -> str:
    token = str(uuid.uuid4())
    try:
        db.session.add(Session(token=token, email=user.email))
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("start_session failed for %s", user.email)
        raise
    logger.info("Session started for %s", user.email)
    return token


def user_for_token(token) -> Optional[User]:
    if not token:
        return None
    sess = db.session.get(Session, token)
    if sess is None:
        return None
    return User.query.filter_by(email=sess.email).first()


def session_token() -> Optional[str]:
    return request.cookies.get(_cookie_name()) or None


def current_user() -> Optional[User]:
    return user_for_token(session_token())


def end_session(token) -> None:
    if not token:
        return
    sess = db.session.get(Session, token)
    if sess is None:
        return
    email = sess.email
    try:
        db.session.delete(sess)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("end_session failed")
        raise
    logger.info("Session ended for %s", email)


def set_session_cookie(response, token):
    response.set_cookie(_cookie_name(), token, path="/", httponly=True, samesite="Lax")
    return response


def clear_session_cookie(response):
    response.set_cookie(_cookie_name(), "", max_age=0, path="/")
    return response


def login_required(view):
    """Redirect to /login unless the request carries a live session cookie."""

    @functools.wraps(view)
    def wrapped(*args, **kwargs):
        user = current_user()
        if user is None:
            return redirect(url_for("auth.login"))
        g.user = user
        return view(*args, **kwargs)

    return wrapped
