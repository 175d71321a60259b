from datetime import datetime
from extensions import db


class Session(db.Model):
    """Login session: random token mapped to the user's email."""
    __tablename__ = "sessions"

    token = db.Column(db.String(36), primary_key=True)
    email = db.Column(db.String(254), db.ForeignKey("users.email"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
