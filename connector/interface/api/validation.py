"""Reusable request-body validators.

Validators raise `PydanticCustomError` so the client sees the message
verbatim in the `{"errors": [...]}` envelope.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic_core import PydanticCustomError

from connector.domain.value import Handle


def required_text(value: Any, msg: str) -> str:
    """Require a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("required", msg)
    return value


def optional_text(value: Any) -> Any:
    """Treat blank strings as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def valid_email(value: Any, msg: str = "Please include a valid email") -> str:
    """Require a syntactically valid email address."""
    if not isinstance(value, str):
        raise PydanticCustomError("email", msg)
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email", msg)
    return value.strip()


def valid_handle(value: Any) -> str | None:
    """Accept a blank or well-formed profile handle."""
    value = optional_text(value)
    if value is None:
        return None
    try:
        return Handle(value).root
    except ValueError:
        raise PydanticCustomError(
            "handle",
            "Handle must be 1-40 characters of letters, digits, '.', '_' or '-'",
        )


def fill_missing(data: Any, fields: dict[str, str]) -> Any:
    """Set absent required fields to None under their wire name.

    Field validators then run for them and report the alias as `param`.

    Args:
        data: Raw request body
        fields: Wire name to attribute name
    """
    if not isinstance(data, dict):
        return data
    data = dict(data)
    for alias, name in fields.items():
        if alias not in data and name not in data:
            data[alias] = None
    return data
