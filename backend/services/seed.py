"""Demo account so a fresh in-memory instance has something to log into."""
import logging

from services.accounts import get_user, register_user
from services.projects import create_project

logger = logging.getLogger(__name__)

DEMO_USER = {"name": "Asha Dev", "email": "asha@example.com", "password": "demo123"}

# Inserted in this order, so the dashboard shows "Neon Notes" first.
DEMO_PROJECTS = [
    ("Glide UI", "CSS-first UI with glass + neon", "HTML, CSS"),
    ("Neon Notes", "A colorful note-taking demo", "Java, CSS, HTML"),
]


def seed_demo_data():
    if get_user(DEMO_USER["email"]) is not None:
        return None
    user = register_user(**DEMO_USER)
    for title, description, tech_stack in DEMO_PROJECTS:
        create_project(user, title, description, tech_stack)
    logger.info("Seeded demo user %s", user.email)
    return user
