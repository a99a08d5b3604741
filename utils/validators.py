"""
Request payload validators.

Product payloads arrive as untyped JSON objects and are checked field by
field; the first missing or invalid field short-circuits with a message
naming it.  Registration payloads are checked through a pydantic model
and the first failing field (name → email → password) is reported.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict

import pydantic
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

from auth.password import MAX_PASSWORD_BYTES
from utils.errors import ValidationError

logger = logging.getLogger(__name__)


# ── Registration ──────────────────────────────────────────────────────────


class RegistrationData(BaseModel):
    name: str = Field(..., min_length=1)
    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, value: str) -> str:
        # syntax only; the address is stored exactly as given
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password longer than {MAX_PASSWORD_BYTES} bytes")
        return value


_REGISTRATION_MESSAGES = {
    "name": "Issue in Name Field",
    "email": "Issue in Email",
    "password": "Issue in Password",
}


def validate_registration(payload: Dict[str, Any]) -> RegistrationData:
    """
    Validate a register body.

    An empty or absent password is rejected before anything else with
    ``Invalid password``.
    """
    password = payload.get("password")
    if not password:
        raise ValidationError("Invalid password")

    try:
        return RegistrationData.model_validate(
            {
                "name": payload.get("name"),
                "email": payload.get("email"),
                "password": password,
            },
            strict=True,
        )
    except pydantic.ValidationError as exc:
        failed = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.debug("Registration rejected, failing fields: %s", sorted(failed))
        for field in ("name", "email", "password"):
            if field in failed:
                raise ValidationError(_REGISTRATION_MESSAGES[field]) from exc
        raise ValidationError("Invalid request body") from exc


# ── Products ──────────────────────────────────────────────────────────────


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_price(value: Any) -> float:
    if not _is_number(value) or value <= 0 or (isinstance(value, float) and not math.isfinite(value)):
        raise ValidationError("Invalid or missing positive Price")
    try:
        return float(value)
    except OverflowError as exc:
        raise ValidationError("Invalid or missing positive Price") from exc


def _check_text(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {label} Key type")
    return value


def validate_product(payload: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Return the validated product fields from ``payload``.

    With ``partial=False`` all of price, description and name are
    required.  With ``partial=True`` only the keys present are checked
    and returned, so absent fields keep their stored values.
    """
    fields: Dict[str, Any] = {}

    if "price" in payload:
        fields["price"] = _check_price(payload["price"])
    elif not partial:
        raise ValidationError("Price Key Missing")

    if "description" in payload:
        fields["description"] = _check_text(payload["description"], "Description")
    elif not partial:
        raise ValidationError("Description Key Missing")

    if "name" in payload:
        fields["name"] = _check_text(payload["name"], "Name")
    elif not partial:
        raise ValidationError("Name Key Missing")

    return fields
