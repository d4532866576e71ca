import logging
from flask import Blueprint, request, jsonify

from store import get_store
from errors import NotFoundError
from validation import get_json_body, validate_points_delta
from Scoring import apply_points_delta

logger = logging.getLogger(__name__)

users_bp = Blueprint("users", __name__, url_prefix="/api/users")


def get_user_or_404(store, user_id):
    user = store.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@users_bp.route("/<user_id>", methods=["GET"])
def get_user(user_id):
    user = get_user_or_404(get_store(), user_id)
    logger.debug(f"Fetched user {user_id}")
    return jsonify(user.to_dict()), 200


@users_bp.route("/<user_id>/points", methods=["PUT"])
def update_points(user_id):
    store = get_store()
    user = get_user_or_404(store, user_id)
    delta = validate_points_delta(get_json_body(request))
    user = apply_points_delta(store, user, delta)
    return jsonify(user.to_dict()), 200
