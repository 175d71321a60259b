from datetime import datetime
from extensions import db


class User(db.Model):
    """Registered account, keyed by its (lowercased) email."""
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(254), unique=True, nullable=False, index=True)
    password = db.Column(db.String(256), nullable=False)  # bcrypt hash
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    projects = db.relationship(
        "Project",
        backref="user",
        lazy="dynamic",
        order_by="Project.id.desc()",
    )
