"""
Request payload validation.

Two kinds of checks live here.  ``validate_keys`` / ``require_keys`` compare
the top-level key set of a payload with a fixed list of expected keys; both
missing and extra keys make the payload invalid.  The security question
validators check a fixed structure (three ``{"answer": <string>}`` objects)
using pydantic models that forbid extra fields.

None of these functions write responses.  Failures are raised as
``InvalidShape`` and rendered by the app's error handlers.
"""

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import InvalidShape

logger = logging.getLogger(__name__)

SECURITY_QUESTION_COUNT = 3


@dataclass(frozen=True)
class KeyCheck:
    valid: bool
    keys: FrozenSet[str]


def validate_keys(payload: Any, expected_keys: Iterable[str]) -> KeyCheck:
    """Check that ``payload`` is a mapping whose keys are exactly ``expected_keys``.

    Order does not matter.  A payload that is not a mapping is invalid and
    reports an empty key set.
    """
    if not isinstance(payload, dict):
        return KeyCheck(valid=False, keys=frozenset())
    keys = frozenset(payload)
    return KeyCheck(valid=keys == frozenset(expected_keys), keys=keys)


def require_keys(payload: Any, expected_keys: Iterable[str], message: str = "Bad Request") -> dict:
    expected = frozenset(expected_keys)
    check = validate_keys(payload, expected)
    if not check.valid:
        missing = sorted(expected - check.keys)
        extra = sorted(check.keys - expected)
        logger.debug("Rejected payload, missing=%s extra=%s", missing, extra)
        raise InvalidShape(message)
    return payload


class SecurityAnswer(BaseModel):
    model_config = ConfigDict(extra="forbid")

    answer: StrictStr


class SecurityQuestionsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    securityQuestions: List[SecurityAnswer] = Field(
        ..., min_length=SECURITY_QUESTION_COUNT, max_length=SECURITY_QUESTION_COUNT
    )

    def answers(self) -> List[str]:
        return [q.answer for q in self.securityQuestions]


class PasswordResetRequest(SecurityQuestionsRequest):
    newPassword: StrictStr


def _parse(model, payload: Any, message: str):
    if not isinstance(payload, dict):
        raise InvalidShape(message)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidShape(message) from exc


def validate_security_questions(
    payload: Any, message: str = "Bad Request: Invalid security questions format"
) -> List[str]:
    """Validate a security question payload and return the answers in order."""
    return _parse(SecurityQuestionsRequest, payload, message).answers()


def validate_password_reset(payload: Any, message: str = "Bad Request") -> PasswordResetRequest:
    """Validate a password reset payload: three answers plus ``newPassword``."""
    return _parse(PasswordResetRequest, payload, message)


def require_document(payload: Any, model, message: str = "Bad Request") -> dict:
    """Check the exact key set of ``payload`` against ``model``'s fields, then
    the field types.  Returns the validated fields as a plain dict."""
    require_keys(payload, model.model_fields, message)
    return _parse(model, payload, message).model_dump()
