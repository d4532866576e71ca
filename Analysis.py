import math
from datetime import datetime, timedelta

WINDOW_DAYS = 7


def week_window(today=None):
    """Inclusive (start, end) ISO date strings for the trailing week."""
    if today is None:
        today = datetime.utcnow().date()
    start_date = today - timedelta(days=WINDOW_DAYS)
    return start_date.isoformat(), today.isoformat()


def compute_weekly_stats(entries):
    entries = list(entries)
    total_goals = len(entries)
    goals_completed = sum(1 for entry in entries if entry.complete)
    if total_goals > 0:
        # half rounds up
        completion_rate = int(math.floor(goals_completed / total_goals * 100 + 0.5))
    else:
        completion_rate = 0
    return {
        "totalPoints": sum(entry.points_earned for entry in entries),
        "goalsCompleted": goals_completed,
        "totalGoals": total_goals,
        "completionRate": completion_rate,
    }
