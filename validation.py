import math
from datetime import datetime
from numbers import Number

from errors import ValidationError

# Column widths in models.py
HABIT_STRING_FIELDS = {"name": 100, "icon": 16, "color": 16, "unit": 50}
ID_MAX_LENGTH = 32
# bcrypt only hashes the first 72 bytes
PASSWORD_MAX_BYTES = 72


def get_json_body(request):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_fields(data, *fields):
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def require_string(data, field, max_length=None):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return value


def require_password(data):
    password = data.get("password")
    if not isinstance(password, str) or not password.strip():
        raise ValidationError("password must be a non-empty string")
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return password


def _number(value, field):
    # bool is a Number subclass
    if isinstance(value, bool) or not isinstance(value, Number):
        raise ValidationError(f"{field} must be a number")
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number")
    return value


def validate_date(value, field="date"):
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a YYYY-MM-DD string")
    # the string is the entry key, so only the zero-padded form is accepted
    try:
        canonical = datetime.strptime(value, "%Y-%m-%d").strftime("%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field} must be a YYYY-MM-DD string")
    if canonical != value:
        raise ValidationError(f"{field} must be a YYYY-MM-DD string")
    return value


def validate_daily_target(value):
    value = _number(value, "dailyTarget")
    if value <= 0:
        raise ValidationError("dailyTarget must be greater than 0")
    return value


def validate_reminder_time(value):
    if not isinstance(value, str):
        raise ValidationError("reminderTime must be in HH:MM format")
    try:
        canonical = datetime.strptime(value, "%H:%M").strftime("%H:%M")
    except ValueError:
        raise ValidationError("reminderTime must be in HH:MM format")
    if canonical != value:
        raise ValidationError("reminderTime must be in HH:MM format")
    return value


def validate_signup(data):
    require_fields(data, "name", "email", "password")
    name = require_string(data, "name", 100)
    email = require_string(data, "email", 120).lower()
    password = require_password(data)
    return name, email, password


def validate_login(data):
    require_fields(data, "email", "password")
    return require_string(data, "email").lower(), require_password(data)


def validate_habit(data, partial=False):
    """
    Map a habit payload onto model attributes.

    With partial=True only the fields present are checked and returned;
    userId is never accepted on update.
    """
    fields = {}
    if not partial:
        require_fields(data, "userId", "name")
        fields["user_id"] = require_string(data, "userId", ID_MAX_LENGTH)
    for key, max_length in HABIT_STRING_FIELDS.items():
        if key in data:
            fields[key] = require_string(data, key, max_length)
    if "dailyTarget" in data:
        fields["daily_target"] = validate_daily_target(data["dailyTarget"])
    if "reminder" in data:
        if not isinstance(data["reminder"], bool):
            raise ValidationError("reminder must be a boolean")
        fields["reminder"] = data["reminder"]
    if "reminderTime" in data:
        fields["reminder_time"] = validate_reminder_time(data["reminderTime"])
    return fields


def validate_progress(data):
    require_fields(data, "userId", "habitId", "date", "value")
    value = _number(data["value"], "value")
    if value < 0:
        raise ValidationError("value must be 0 or greater")
    return (
        require_string(data, "userId", ID_MAX_LENGTH),
        require_string(data, "habitId", ID_MAX_LENGTH),
        validate_date(data["date"]),
        value,
    )


def validate_points_delta(data):
    delta = data.get("points")
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise ValidationError("points must be an integer")
    return delta
