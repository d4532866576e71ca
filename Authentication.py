import logging
from datetime import datetime, timedelta
from flask import Blueprint, current_app, request, jsonify
import jwt
import bcrypt

from models import User
from store import get_store
from errors import ConflictError, AuthenticationError
from validation import get_json_body, validate_signup, validate_login

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


# Generate JWT
def generate_token(user_id, email):
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": datetime.utcnow() + timedelta(hours=current_app.config["JWT_EXPIRES_HOURS"]),
        "iat": datetime.utcnow()
    }
    token = jwt.encode(payload, current_app.config["JWT_SECRET_KEY"], algorithm="HS256")
    return token


def hash_password(password):
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password, hashed):
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


# Signup endpoint
@auth_bp.route("/signup", methods=["POST"])
def signup():
    name, email, password = validate_signup(get_json_body(request))
    store = get_store()
    if store.get_user_by_email(email):
        logger.error(f"Signup with registered email {email}")
        raise ConflictError("Email already registered")
    user = store.add_user(User(
        name=name,
        email=email,
        password=hash_password(password),
        points=0,
        level=1,
        badges=[]
    ))
    logger.info(f"User registered: {user.id}")
    return jsonify({
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "points": user.points,
        "level": user.level,
        "token": generate_token(user.id, user.email)
    }), 201


# Login endpoint
@auth_bp.route("/login", methods=["POST"])
def login():
    email, password = validate_login(get_json_body(request))
    user = get_store().get_user_by_email(email)
    if not user or not check_password(password, user.password):
        logger.error(f"Failed login for {email}")
        raise AuthenticationError("Invalid email or password")
    logger.info(f"User logged in: {user.id}")
    return jsonify({
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "points": user.points,
        "level": user.level,
        "badges": list(user.badges or []),
        "token": generate_token(user.id, user.email)
    }), 200
