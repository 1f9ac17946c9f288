"""
User registration, login and identity recovery.

Passwords are stored as bcrypt hashes.  Security answers are compared in
the order they were saved; see ``security.verify_security_answers``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from . import schemas
from .config import Settings
from .dependencies import get_settings, get_users
from .errors import Conflict, InvalidInput, NotFound, Unauthorized
from .security import hash_password, stored_answers, verify_password, verify_security_answers
from .store import Collection, DuplicateKeyError
from .validation import require_keys, validate_password_reset, validate_security_questions

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTER_KEYS = ("email", "password")


def _find_user(users: Collection, email: str) -> dict:
    user = users.find_one({"email": email})
    if user is None:
        raise NotFound("User not found")
    return user


@router.post("/register", response_model=schemas.Registration)
def register(
    payload: Any = Body(None),
    users: Collection = Depends(get_users),
    settings: Settings = Depends(get_settings),
):
    require_keys(payload, REGISTER_KEYS)
    email, password = payload["email"], payload["password"]
    # login rejects empty credentials, so never create an account with them
    if not (email and password and isinstance(email, str) and isinstance(password, str)):
        raise InvalidInput()

    if users.find_one({"email": email}) is not None:
        logger.warning("Registration rejected, %s already exists", email)
        raise Conflict()
    hashed = hash_password(password, rounds=settings.bcrypt_rounds)
    try:
        users.insert_one({"email": email, "password": hashed})
    except DuplicateKeyError:
        raise Conflict()

    logger.info("Registered %s", email)
    return {"message": "Registration successful", "user": {"email": email}}


@router.post("/login", response_model=schemas.Message)
def login(payload: Any = Body(None), users: Collection = Depends(get_users)):
    body = payload if isinstance(payload, dict) else {}
    email, password = body.get("email"), body.get("password")
    if not (email and password and isinstance(email, str) and isinstance(password, str)):
        raise InvalidInput("Bad Request: Missing email or password")

    user = users.find_one({"email": email})
    if user is None or not verify_password(password, user.get("password", "")):
        logger.warning("Failed login for %s", email)
        raise Unauthorized()
    return {"message": "Authentication successful"}


@router.post("/users/{email}/verify-security-question", response_model=schemas.Message)
def verify_security_question(
    email: str, payload: Any = Body(None), users: Collection = Depends(get_users)
):
    answers = validate_security_questions(payload)
    user = _find_user(users, email)

    expected = stored_answers(user)
    if expected is None or not verify_security_answers(answers, expected):
        logger.warning("Security questions answered incorrectly for %s", email)
        raise Unauthorized("Unauthorized: Incorrect")
    return {"message": "Security questions successfully answered"}


@router.post("/users/{email}/reset-password", response_model=schemas.Message)
def reset_password(
    email: str,
    payload: Any = Body(None),
    users: Collection = Depends(get_users),
    settings: Settings = Depends(get_settings),
):
    request = validate_password_reset(payload)
    user = _find_user(users, email)

    expected = stored_answers(user)
    if expected is None or not verify_security_answers(request.answers(), expected):
        logger.warning("Password reset refused for %s", email)
        raise Unauthorized()

    hashed = hash_password(request.newPassword, rounds=settings.bcrypt_rounds)
    result = users.update_one({"email": email}, {"password": hashed})
    if result.matched_count == 0:
        raise NotFound("User not found")
    logger.info("Password reset for %s", email)
    return {"message": "Password reset successful"}
