import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    # "sqlite://" is an in-memory database: everything is gone when the process exits.
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite://")

    # Cookie that carries the session token
    SESSION_COOKIE = os.getenv("SESSION_COOKIE", "SESSIONID")

    # Demo account (asha@example.com / demo123) with two sample projects
    SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", "true")

    # bcrypt work factor for new password hashes
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SEED_DEMO_DATA = False
    BCRYPT_ROUNDS = 4
