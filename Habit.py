import logging
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError

from models import Habit
from store import get_store
from errors import NotFoundError, InternalError
from validation import get_json_body, validate_habit

logger = logging.getLogger(__name__)

habits_bp = Blueprint("habits", __name__, url_prefix="/api/habits")


def get_habit_or_404(store, habit_id):
    habit = store.get_habit(habit_id)
    if not habit:
        raise NotFoundError("Habit not found")
    return habit


@habits_bp.route("", methods=["POST"])
def create_habit():
    data = get_json_body(request)
    logger.debug(f"Create habit payload: {data}")
    habit = get_store().save_habit(Habit(**validate_habit(data)))
    logger.info(f"Habit created: {habit.name} for user {habit.user_id}")
    return jsonify(habit.to_dict()), 201


@habits_bp.route("/user/<user_id>", methods=["GET"])
def get_habits(user_id):
    habits = get_store().list_habits(user_id)
    logger.debug(f"Fetched {len(habits)} habits for user {user_id}")
    return jsonify([habit.to_dict() for habit in habits]), 200


@habits_bp.route("/<habit_id>", methods=["PUT"])
def update_habit(habit_id):
    store = get_store()
    habit = get_habit_or_404(store, habit_id)
    data = get_json_body(request)
    logger.debug(f"Update habit {habit_id} payload: {data}")
    for attr, value in validate_habit(data, partial=True).items():
        setattr(habit, attr, value)
    store.save_habit(habit)
    logger.info(f"Habit {habit_id} updated")
    return jsonify(habit.to_dict()), 200


@habits_bp.route("/<habit_id>", methods=["DELETE"])
def delete_habit(habit_id):
    store = get_store()
    habit = get_habit_or_404(store, habit_id)
    logger.info(f"Deleting habit {habit_id} for user {habit.user_id}")
    store.delete_habit(habit)

    # The habit is gone at this point; a failed cascade is reported, not undone.
    try:
        deleted = store.delete_progress_for_habit(habit_id)
    except SQLAlchemyError as e:
        store.session.rollback()
        logger.error(f"Habit {habit_id} deleted but its progress entries were not: {str(e)}")
        raise InternalError(f"Habit deleted but its progress entries could not be removed: {str(e)}")
    logger.info(f"Habit {habit_id} deleted with {deleted} progress entries")
    return jsonify({"message": "Habit deleted", "deletedEntries": deleted}), 200
