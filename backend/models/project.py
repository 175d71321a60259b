from datetime import datetime
from extensions import db


class Project(db.Model):
    """Portfolio entry shown on its owner's dashboard."""
    __tablename__ = "projects"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    title = db.Column(db.String(256), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")
    tech_stack = db.Column(db.String(256), nullable=False, default="")
    owner = db.Column(db.String(128), nullable=False)  # owner's name at creation time
    # server local time, so the dashboard date is the server's calendar day
    created_at = db.Column(db.DateTime, default=datetime.now)

    @property
    def created_on(self):
        return self.created_at.date().isoformat() if self.created_at else ""

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "description": self.description,
            "tech_stack": self.tech_stack,
            "owner": self.owner,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
