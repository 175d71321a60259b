"""Registration and credential checks for user accounts."""
import base64
import hashlib
import logging

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from models import User

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "All fields required."
EMAIL_TAKEN = "Email already registered."
INVALID_CREDENTIALS = "Invalid credentials"


class AccountError(Exception):
    """Validation failure shown inline on the register/login forms."""


def normalize_email(raw) -> str:
    return (raw or "").strip().lower()


def get_user(email):
    return User.query.filter_by(email=normalize_email(email)).first()


def _prehash(password: str) -> bytes:
    # bcrypt reads at most 72 bytes; a fixed-size digest keeps longer passwords whole
    return base64.b64encode(hashlib.sha256(password.encode()).digest())


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=current_app.config.get("BCRYPT_ROUNDS", 12))
    return bcrypt.hashpw(_prehash(password), salt).decode()


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(_prehash(password), hashed.encode())


def register_user(name, email, password) -> User:
    name = (name or "").strip()
    email = normalize_email(email)
    password = (password or "").strip()

    error = None
    if not name or not email or not password:
        error = ALL_FIELDS_REQUIRED
    # a taken email wins over missing fields
    if email and get_user(email) is not None:
        error = EMAIL_TAKEN
    if error:
        raise AccountError(error)

    user = User(name=name, email=email, password=hash_password(password))
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # another request registered the same email between the check and the commit
        db.session.rollback()
        raise AccountError(EMAIL_TAKEN)
    except Exception:
        db.session.rollback()
        logger.exception("register_user failed for %s", email)
        raise

    logger.info("Registered user %s", email)
    return user


def authenticate(email, password) -> User:
    user = get_user(email)
    password = (password or "").strip()
    if user is None or not check_password(password, user.password):
        logger.warning("Failed login for %s", normalize_email(email))
        raise AccountError(INVALID_CREDENTIALS)
    return user
