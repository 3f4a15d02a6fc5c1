"""
Predicate guards for primitive inputs.

Each check returns None when the value passes and raises
``ValidationError`` naming the offending variable otherwise.
"""

from __future__ import annotations

import re
from typing import Any

from recruitment.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*$")
ALPHANUMERIC_PATTERN = re.compile(r"^[0-9A-Za-z]+$")


def _check(condition: bool, message: str, value: Any) -> None:
    if not condition:
        raise ValidationError(message=message, context={"value": value})


def is_number(value: Any, var_name: str) -> None:
    """Integer value or integer string with no padding, sign other than '-', or fraction."""
    text = str(value)
    try:
        parsed = int(text)
    except (TypeError, ValueError):
        parsed = None
    _check(
        parsed is not None
        and text.isascii()
        and not isinstance(value, bool)
        and len(str(parsed)) == len(text),
        f"{var_name} needs to be a number.",
        value,
    )


def is_positive_integer(value: Any, var_name: str) -> None:
    is_number(value, var_name)
    _check(int(value) > 0, f"{var_name} needs to be a positive integer.", value)


def is_email_valid(value: Any, var_name: str = "email") -> None:
    _check(
        isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None,
        f"{var_name} needs to be a valid email address.",
        value,
    )


def is_string(value: Any, var_name: str) -> None:
    _check(isinstance(value, str), f"{var_name} needs to be a string.", value)


def is_string_non_zero_length(value: Any, var_name: str) -> None:
    is_string(value, var_name)
    _check(len(value) > 0, f"{var_name} needs to have non-zero length.", value)


def is_alphanumeric_string(value: Any, var_name: str) -> None:
    is_string(value, var_name)
    _check(
        ALPHANUMERIC_PATTERN.fullmatch(value) is not None,
        f"{var_name} needs to only contain letters and numbers.",
        value,
    )


def is_number_between(value: Any, lower_limit: int, upper_limit: int, var_name: str) -> None:
    """Inclusive on both limits."""
    is_number(value, var_name)
    _check(
        lower_limit <= int(value) <= upper_limit,
        f"{var_name} needs to be a number between {lower_limit} and {upper_limit}.",
        value,
    )
