import uuid
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def new_id():
    return uuid.uuid4().hex


# Owner ids are plain indexed columns: integrity and cascades are handled by the application.
class User(db.Model):
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(120), nullable=False)
    points = db.Column(db.Integer, nullable=False, default=0)
    level = db.Column(db.Integer, nullable=False, default=1)
    badges = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "points": self.points,
            "level": self.level,
            "badges": list(self.badges or []),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class Habit(db.Model):
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    user_id = db.Column(db.String(32), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(16), nullable=False, default="⭐")
    color = db.Column(db.String(16), nullable=False, default="#6366f1")
    daily_target = db.Column(db.Float, nullable=False, default=1)
    unit = db.Column(db.String(50), nullable=False, default="times")
    reminder = db.Column(db.Boolean, nullable=False, default=True)
    reminder_time = db.Column(db.String(5), nullable=False, default="09:00")
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "icon": self.icon,
            "color": self.color,
            "dailyTarget": self.daily_target,
            "unit": self.unit,
            "reminder": self.reminder,
            "reminderTime": self.reminder_time,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class ProgressEntry(db.Model):
    __tablename__ = "progress_entry"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    user_id = db.Column(db.String(32), nullable=False, index=True)
    habit_id = db.Column(db.String(32), nullable=False, index=True)
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    value = db.Column(db.Float, nullable=False, default=0)
    complete = db.Column(db.Boolean, nullable=False, default=False)
    points_earned = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "habitId": self.habit_id,
            "date": self.date,
            "value": self.value,
            "complete": self.complete,
            "pointsEarned": self.points_earned,
        }
