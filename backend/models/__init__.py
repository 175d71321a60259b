from models.user import User
from models.session import Session
from models.project import Project

__all__ = ["User", "Session", "Project"]
