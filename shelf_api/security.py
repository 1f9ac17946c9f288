"""
Credential checks.

Passwords are hashed with bcrypt; the cost factor comes from settings
(10 unless ``BCRYPT_ROUNDS`` says otherwise).  Security answers are stored
as plain strings and compared position by position: the first answer given
must equal the first answer stored, and so on.  Supplying the right answers
in a different order does not verify.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

import bcrypt

from .config import settings
from .validation import SECURITY_QUESTION_COUNT

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes; newer releases reject longer input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored bcrypt hash.

    A stored value that is not a bcrypt hash never verifies.
    """
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        logger.warning("Stored password is not a valid bcrypt hash")
        return False


def verify_security_answers(provided: Sequence[str], stored: Sequence[str]) -> bool:
    if len(provided) != SECURITY_QUESTION_COUNT or len(stored) != SECURITY_QUESTION_COUNT:
        return False
    return all(given == expected for given, expected in zip(provided, stored))


def stored_answers(user: Mapping[str, Any]) -> Optional[list]:
    """Return the answers saved on a user document, or None if it has none."""
    questions = user.get("securityQuestions")
    if not isinstance(questions, list):
        return None
    answers = [q.get("answer") for q in questions if isinstance(q, dict)]
    if len(answers) != len(questions):
        return None
    return answers
