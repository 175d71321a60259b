from routes.auth import auth_bp
from routes.pages import pages_bp
from routes.projects import projects_bp

blueprints = [pages_bp, auth_bp, projects_bp]
