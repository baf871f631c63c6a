"""
User rules

Validation, credential hashing and default-value derivation for users.
A user always belongs to a team and has a specific role in the team.
"""

import re
from typing import Any, Dict, Optional

import bcrypt

from level.config import ApplicationConfig
from level.result import Error, Result, Return

from .changeset import Changeset
from .entities import UserRole, UserState

USERNAME_FORMAT = re.compile(r"^[a-z][a-z0-9\-.]*[a-z0-9]$")

# Borrowed from http://www.regular-expressions.info/email.html
EMAIL_FORMAT = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

SIGNUP_FIELDS = ("team_id", "role", "email", "username", "time_zone", "password")

DEFAULT_TIME_ZONE = "UTC"

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def parse_state(value: Any) -> Result[str]:
    """
    Parses an incoming state value and either returns an ok result with the
    parsed value, or an error result if the value is not recognized.
    """
    try:
        UserState(value)
        return Return.ok(value)
    except ValueError:
        return Return.err(Error("STATE_NOT_RECOGNIZED", "State not recognized"))


def parse_role(value: Any) -> Result[str]:
    """
    Parses an incoming role value and either returns an ok result with the
    parsed value, or an error result if the value is not recognized.
    """
    try:
        UserRole(value)
        return Return.ok(value)
    except ValueError:
        return Return.err(Error("ROLE_NOT_RECOGNIZED", "Role not recognized"))


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    rounds = rounds or ApplicationConfig.BCRYPT_ROUNDS
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))


def signup_changeset(struct: Any, params: Optional[Dict[str, Any]] = None) -> Changeset:
    """
    Builds a changeset for signup based on the ``struct`` and ``params``.

    The returned changeset never carries the plaintext password: when valid it
    holds ``password_hash`` instead.
    """
    changeset = Changeset.cast(struct, params, SIGNUP_FIELDS)
    validate_user_params(changeset)
    put_default_time_zone(changeset)
    put_pass_hash(changeset)
    return changeset


def validate_user_params(changeset: Changeset) -> Changeset:
    """Applies user attribute validations to a changeset."""
    return (
        changeset.validate_required(["username", "email", "password"])
        .validate_length("email", min=1, max=254)
        .validate_length("username", min=3, max=20)
        .validate_length("password", min=6)
        .validate_change("password", _password_bytes_error)
        .validate_format("username", USERNAME_FORMAT, message="must be lowercase and alphanumeric")
        .validate_format("email", EMAIL_FORMAT, message="is invalid")
        .validate_change("role", _role_error)
        .unique_constraint("email", "users_team_id_email_index")
        .unique_constraint("username", "users_team_id_username_index")
    )


def put_pass_hash(changeset: Changeset) -> Changeset:
    password = changeset.get_change("password")
    if not changeset.valid or password is None:
        return changeset

    changeset.put_change("password_hash", hash_password(password))
    return changeset.delete_change("password")


def put_default_time_zone(changeset: Changeset) -> Changeset:
    if not changeset.get_change("time_zone"):
        changeset.put_change("time_zone", DEFAULT_TIME_ZONE)
    return changeset


def _password_bytes_error(value: Any) -> Optional[str]:
    if isinstance(value, str) and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return f"should be at most {MAX_PASSWORD_BYTES} byte(s)"
    return None


def _role_error(value: Any) -> Optional[str]:
    result = parse_role(value)
    if result.is_err():
        return result.error.message
    return None
