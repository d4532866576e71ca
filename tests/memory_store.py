from models import new_id


class MemoryStore:
    """In-memory stand-in for HabitStore used by the engine tests."""

    def __init__(self):
        self.users = {}
        self.habits = {}
        self.entries = {}
        self.writes = 0

    def _put(self, table, obj):
        if not obj.id:
            obj.id = new_id()
        table[obj.id] = obj
        self.writes += 1
        return obj

    def get_user(self, user_id):
        return self.users.get(user_id)

    def save_user(self, user):
        return self._put(self.users, user)

    def get_habit(self, habit_id):
        return self.habits.get(habit_id)

    def save_habit(self, habit):
        return self._put(self.habits, habit)

    def find_progress(self, user_id, habit_id, date):
        for entry in self.entries.values():
            if (entry.user_id, entry.habit_id, entry.date) == (user_id, habit_id, date):
                return entry
        return None

    def save_progress(self, entry):
        return self._put(self.entries, entry)
