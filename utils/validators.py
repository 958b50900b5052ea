"""
Request payload validators used by the account controllers.

Validation never stops at the first problem: every field violation is
collected and the messages are joined into one diagnostic string.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional, Type

from pydantic import BaseModel, ValidationError

from utils.schemas import LoginData, RegisterData

logger = logging.getLogger(__name__)


class ValidationResult(NamedTuple):
    value: Any
    error: Optional[ValidationError] = None

    @property
    def message(self) -> str:
        """All violation messages joined, or an empty string when valid."""
        if self.error is None:
            return ""
        return ". ".join(_describe(err) for err in self.error.errors())


def _describe(err: dict) -> str:
    field = ".".join(str(part) for part in err["loc"]) or "value"
    if err["type"] == "missing":
        return f'"{field}" is required'
    if err["type"] == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    return f'"{field}" {err["msg"][:1].lower()}{err["msg"][1:]}'


def _validate(schema: Type[BaseModel], data: Any) -> ValidationResult:
    try:
        return ValidationResult(schema.model_validate(data))
    except ValidationError as exc:
        result = ValidationResult(data, exc)
        logger.debug("%s rejected: %s", schema.__name__, result.message)
        return result


def validate_registration(data: Any) -> ValidationResult:
    """Check a sign-up payload for ``name``, ``email`` and ``password``."""
    return _validate(RegisterData, data)


def validate_login(data: Any) -> ValidationResult:
    """Check a log-in payload for ``name`` and ``password``."""
    return _validate(LoginData, data)
