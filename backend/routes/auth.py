import logging
from flask import Blueprint, redirect, render_template, request, url_for
from services.accounts import AccountError, authenticate, register_user
from services.sessions import (
    clear_session_cookie,
    end_session,
    session_token,
    set_session_cookie,
    start_session,
)

logger = logging.getLogger(__name__)
auth_bp = Blueprint("auth", __name__)


def _signed_in_redirect(user):
    token = start_session(user)
    return set_session_cookie(redirect(url_for("projects.dashboard")), token)


@auth_bp.route("/register", methods=["GET", "POST"])
def register():
    if request.method == "GET":
        return render_template("register.html")

    form = request.form
    try:
        user = register_user(form.get("name"), form.get("email"), form.get("password"))
    except AccountError as e:
        return render_template(
            "register.html",
            error=str(e),
            name=form.get("name", ""),
            email=form.get("email", ""),
        )
    return _signed_in_redirect(user)


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "GET":
        return render_template("login.html")

    form = request.form
    try:
        user = authenticate(form.get("email"), form.get("password"))
    except AccountError as e:
        return render_template("login.html", error=str(e), email=form.get("email", ""))
    logger.info("Login for %s", user.email)
    return _signed_in_redirect(user)


@auth_bp.get("/logout")
def logout():
    end_session(session_token())
    return clear_session_cookie(redirect(url_for("pages.index")))
