import math
import logging

from models import ProgressEntry
from errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

POINTS_PER_LEVEL = 100
MAX_ENTRY_POINTS = 10

# Ascending by threshold
BADGE_THRESHOLDS = (
    (100, "Centenary"),
    (500, "Champion"),
    (1000, "Legend"),
)


def compute_entry_outcome(recorded_value, daily_target):
    """Return (complete, points_earned) for one day's value against its target."""
    if daily_target <= 0:
        raise ValidationError("dailyTarget must be greater than 0")
    if recorded_value >= daily_target:
        return True, MAX_ENTRY_POINTS
    # partial credit is truncated, never rounded
    return False, math.floor(recorded_value / daily_target * MAX_ENTRY_POINTS)


def compute_level(points):
    return points // POINTS_PER_LEVEL + 1


def award_badges(badges, points, thresholds=BADGE_THRESHOLDS):
    """
    Return the badge list extended with every badge whose threshold
    the point total has reached. Existing badges are always kept.
    """
    awarded = list(badges or [])
    for threshold, badge in thresholds:
        if points >= threshold and badge not in awarded:
            awarded.append(badge)
    return awarded


def upsert_progress_entry(store, user_id, habit_id, date, recorded_value):
    habit = store.get_habit(habit_id)
    if not habit:
        raise NotFoundError("Habit not found")

    complete, points_earned = compute_entry_outcome(recorded_value, habit.daily_target)

    entry = store.find_progress(user_id, habit_id, date)
    if entry:
        entry.value = recorded_value
        entry.complete = complete
        entry.points_earned = points_earned
        logger.debug(f"Overwriting progress {entry.id} for habit {habit_id} on {date}")
    else:
        entry = ProgressEntry(
            user_id=user_id,
            habit_id=habit_id,
            date=date,
            value=recorded_value,
            complete=complete,
            points_earned=points_earned,
        )
    store.save_progress(entry)
    logger.info(f"Progress recorded for habit {habit_id} on {date}: {recorded_value} ({points_earned} pts)")
    return entry


def apply_points_delta(store, user, delta):
    # points never drop below zero
    user.points = max((user.points or 0) + delta, 0)
    user.level = compute_level(user.points)
    badges = award_badges(user.badges, user.points)
    earned = badges[len(user.badges or []):]
    if earned:
        logger.info(f"User {user.id} earned badges: {', '.join(earned)}")
    # assign a new list so the JSON column is flagged dirty
    user.badges = badges
    store.save_user(user)
    logger.info(f"User {user.id} points updated by {delta}: {user.points} pts, level {user.level}")
    return user
