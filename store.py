import logging
from flask import current_app
from sqlalchemy.exc import IntegrityError

from models import User, Habit, ProgressEntry
from errors import ConflictError

logger = logging.getLogger(__name__)

STORE_KEY = "habit_store"


class HabitStore:
    """
    Persistence client for users, habits and progress entries.

    Every write commits on its own; nothing here couples two documents
    in one transaction.
    """

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _commit(self, obj):
        self.session.add(obj)
        self.session.commit()
        return obj

    # Users
    def get_user(self, user_id):
        return self.session.get(User, user_id)

    def get_user_by_email(self, email):
        return User.query.filter_by(email=email).first()

    def add_user(self, user):
        try:
            return self._commit(user)
        except IntegrityError:
            self.session.rollback()
            logger.error(f"Duplicate email on signup: {user.email}")
            raise ConflictError("Email already registered")

    def save_user(self, user):
        return self._commit(user)

    # Habits
    def get_habit(self, habit_id):
        return self.session.get(Habit, habit_id)

    def list_habits(self, user_id):
        return Habit.query.filter_by(user_id=user_id).order_by(Habit.created_at).all()

    def save_habit(self, habit):
        return self._commit(habit)

    def delete_habit(self, habit):
        self.session.delete(habit)
        self.session.commit()

    # Progress entries
    def find_progress(self, user_id, habit_id, date):
        return ProgressEntry.query.filter_by(user_id=user_id, habit_id=habit_id, date=date).first()

    def save_progress(self, entry):
        return self._commit(entry)

    def progress_for_date(self, user_id, date):
        """Entries of one day paired with their habit (None when the habit is gone)."""
        return (
            self.session.query(ProgressEntry, Habit)
            .outerjoin(Habit, Habit.id == ProgressEntry.habit_id)
            .filter(ProgressEntry.user_id == user_id, ProgressEntry.date == date)
            .all()
        )

    def recent_progress_for_habit(self, habit_id, limit=30):
        return (
            ProgressEntry.query.filter_by(habit_id=habit_id)
            .order_by(ProgressEntry.date.desc())
            .limit(limit)
            .all()
        )

    def progress_between(self, user_id, start, end):
        return ProgressEntry.query.filter(
            ProgressEntry.user_id == user_id,
            ProgressEntry.date >= start,
            ProgressEntry.date <= end,
        ).all()

    def delete_progress_for_habit(self, habit_id):
        count = ProgressEntry.query.filter_by(habit_id=habit_id).delete(synchronize_session=False)
        self.session.commit()
        return count


def get_store():
    return current_app.extensions[STORE_KEY]
