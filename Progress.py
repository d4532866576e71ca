import logging
from flask import Blueprint, request, jsonify

from store import get_store
from validation import get_json_body, validate_progress, validate_date
from Scoring import upsert_progress_entry
from Analysis import week_window, compute_weekly_stats

logger = logging.getLogger(__name__)

progress_bp = Blueprint("progress", __name__, url_prefix="/api/progress")

HISTORY_LIMIT = 30


@progress_bp.route("", methods=["POST"])
def record_progress():
    data = get_json_body(request)
    logger.debug(f"Record progress payload: {data}")
    user_id, habit_id, date, value = validate_progress(data)
    entry = upsert_progress_entry(get_store(), user_id, habit_id, date, value)
    return jsonify(entry.to_dict()), 201


@progress_bp.route("/user/<user_id>/date/<date>", methods=["GET"])
def get_progress_for_date(user_id, date):
    validate_date(date)
    results = []
    for entry, habit in get_store().progress_for_date(user_id, date):
        data = entry.to_dict()
        data["habit"] = habit.to_dict() if habit else None
        results.append(data)
    logger.debug(f"Fetched {len(results)} progress entries for user {user_id} on {date}")
    return jsonify(results), 200


@progress_bp.route("/habit/<habit_id>", methods=["GET"])
def get_habit_history(habit_id):
    entries = get_store().recent_progress_for_habit(habit_id, limit=HISTORY_LIMIT)
    logger.debug(f"Fetched history for habit {habit_id}: {len(entries)} entries")
    return jsonify([entry.to_dict() for entry in entries]), 200


@progress_bp.route("/user/<user_id>/week", methods=["GET"])
def get_weekly_stats(user_id):
    start, end = week_window()
    entries = get_store().progress_between(user_id, start, end)
    stats = compute_weekly_stats(entries)
    logger.debug(f"Weekly stats for user {user_id} ({start} to {end}): {stats}")
    return jsonify(stats), 200
