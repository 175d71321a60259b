from flask import Blueprint, g, redirect, render_template, request, url_for
from services.projects import create_project, list_projects
from services.sessions import login_required

projects_bp = Blueprint("projects", __name__)


@projects_bp.get("/dashboard")
@login_required
def dashboard():
    return render_template("dashboard.html", user=g.user, projects=list_projects(g.user))


@projects_bp.get("/projects/new")
@login_required
def new_project():
    return render_template("project_form.html", user=g.user)


@projects_bp.post("/projects")
@login_required
def save_project():
    form = request.form
    create_project(g.user, form.get("title"), form.get("description"), form.get("techStack"))
    return redirect(url_for("projects.dashboard"))
