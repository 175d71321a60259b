from flask import Blueprint, render_template
from services.sessions import current_user

pages_bp = Blueprint("pages", __name__)


@pages_bp.get("/")
def index():
    return render_template("index.html", user=current_user())
