import logging

from extensions import db
from models import Project, User

logger = logging.getLogger(__name__)


def create_project(user: User, title, description, tech_stack) -> Project:
    project = Project(
        user_id=user.id,
        title=(title or "").strip(),
        description=(description or "").strip(),
        tech_stack=(tech_stack or "").strip(),
        owner=user.name,
    )
    try:
        db.session.add(project)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("create_project failed for %s", user.email)
        raise
    logger.info("Project %r created for %s", project.title, user.email)
    return project


def list_projects(user: User):
    """Newest first: a new project always lands at the top of the list."""
    return user.projects.all()
