from datetime import date

import pytest

from models import User
from services import accounts
from services.accounts import AccountError, authenticate, register_user
from services.projects import create_project, list_projects
from services.sessions import end_session, start_session, user_for_token


def test_password_is_not_stored_in_clear(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        assert user.password != "engine"
        assert authenticate("ADA@example.com", " engine ").id == user.id


def test_authenticate_rejects_bad_password(app):
    with app.app_context():
        register_user("Ada", "ada@example.com", "engine")
        with pytest.raises(AccountError, match="Invalid credentials"):
            authenticate("ada@example.com", "wrong")


def test_duplicate_caught_by_unique_constraint(app, monkeypatch):
    with app.app_context():
        register_user("Ada", "ada@example.com", "engine")
        # simulate a concurrent registration slipping past the existence check
        monkeypatch.setattr(accounts, "get_user", lambda email: None)
        with pytest.raises(AccountError, match="Email already registered."):
            register_user("Imposter", "ada@example.com", "x")
        assert User.query.count() == 1


def test_session_lifecycle(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        token = start_session(user)
        other = start_session(user)
        assert token != other
        assert user_for_token(token).id == user.id

        end_session(token)
        assert user_for_token(token) is None
        assert user_for_token(other).id == user.id

        end_session(token)
        end_session(None)
        assert user_for_token(None) is None


def test_list_projects_newest_first(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        for title in ("a", "b", "c"):
            create_project(user, title, "", "")
        assert [p.title for p in list_projects(user)] == ["c", "b", "a"]


def test_created_on_is_local_date(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        before = date.today().isoformat()
        project = create_project(user, "Engine", "", "")
        after = date.today().isoformat()
        assert project.created_on in (before, after)


def test_create_project_trims_fields(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        project = create_project(user, "  Engine ", " notes ", " Brass ")
        assert (project.title, project.description, project.tech_stack) == ("Engine", "notes", "Brass")
        assert project.owner == "Ada"


def test_create_project_allows_blank_fields(app):
    with app.app_context():
        user = register_user("Ada", "ada@example.com", "engine")
        project = create_project(user, "  ", None, None)
        assert (project.title, project.description, project.tech_stack) == ("", "", "")
        assert list_projects(user) == [project]


def test_long_password_round_trips(app):
    long_password = "p" * 80
    with app.app_context():
        register_user("Ada", "ada@example.com", long_password)
        assert authenticate("ada@example.com", long_password).email == "ada@example.com"
        # differs only past bcrypt's 72-byte window
        with pytest.raises(AccountError, match="Invalid credentials"):
            authenticate("ada@example.com", "p" * 79 + "q")


def test_taken_email_reported_before_missing_fields(app):
    with app.app_context():
        register_user("Ada", "ada@example.com", "engine")
        with pytest.raises(AccountError, match="Email already registered."):
            register_user("", "ADA@example.com", "")
        with pytest.raises(AccountError, match="All fields required."):
            register_user("", "new@example.com", "")
