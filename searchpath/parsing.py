"""Value coercion for configuration read from the environment or YAML."""

from __future__ import annotations


_BOOLEAN_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when it is missing or blank."""

    text = "" if value is None else str(value).strip()
    return text or None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a boolean setting given as a bool or a case-insensitive token.

    Raises:
        ValueError: If the value is blank or not a recognized token.
    """

    if isinstance(value, bool):
        return value
    token = (normalize_optional_string(value) or "").lower()
    if token not in _BOOLEAN_TOKENS:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return _BOOLEAN_TOKENS[token]


def parse_positive_float(value: object, field_name: str) -> float:
    """Parse a strictly positive number of seconds or similar quantity.

    Raises:
        ValueError: If the value is not numeric or is not greater than zero.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive number.")
    try:
        number = float(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"`{field_name}` must be a positive number.") from exc
    if number != number or number <= 0.0:
        raise ValueError(f"`{field_name}` must be a positive number.")
    return number


def parse_delimiter(value: object, field_name: str) -> str:
    """Validate a delimiter setting as exactly one character.

    Whitespace delimiters are accepted as-is, so the value is not stripped.
    """

    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"`{field_name}` must be a single character, got {value!r}.")
    return value
