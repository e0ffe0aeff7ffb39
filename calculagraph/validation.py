"""Decorator argument validation for calculagraph."""

import inspect
import re
import string
from collections.abc import Sequence
from typing import Any

from .exceptions import (
    ConfigurationError,
    InvalidFormatError,
    InvalidTargetError,
    InvalidTimeUnitError,
)
from .units import TimeUnit

# Constants
DEFAULT_UNIT = TimeUnit.MILLISECONDS
DEFAULT_FORMAT = "fn:{name} cost {elapsed}{unit}"

USAGE = "[(TimeUnit[, FormatString])]"

_UNIT_TOKENS = {
    "ns": TimeUnit.NANOSECONDS,
    "us": TimeUnit.MICROSECONDS,
    "μs": TimeUnit.MICROSECONDS,  # greek mu
    "µs": TimeUnit.MICROSECONDS,  # micro sign
    "ms": TimeUnit.MILLISECONDS,
    "s": TimeUnit.SECONDS,
}

# Placeholder names a format string may reference; "" and "0" are the
# positional form and receive the elapsed value.
_ELAPSED_FIELDS = {"", "0", "elapsed"}
_KNOWN_FIELDS = _ELAPSED_FIELDS | {"name", "unit"}

_FIELD_ROOT = re.compile(r"[^.\[]*")


def parse_time_unit(token: Any) -> TimeUnit:
    """Resolve a time unit token.

    Args:
        token: A TimeUnit member or one of "ns", "us", "μs", "ms", "s"
            (case-insensitive)

    Raises:
        InvalidTimeUnitError: If the token is not recognized
    """
    if isinstance(token, TimeUnit):
        return token

    if isinstance(token, str):
        unit = _UNIT_TOKENS.get(token.strip().lower())
        if unit is not None:
            return unit

    raise InvalidTimeUnitError(
        f"Invalid unit of time {token!r}, only `s`, `ms`, `us`, `ns` are supported"
    )


def validate_format(template: Any) -> str:
    """Check that a format string can render a timing message.

    The template uses ``str.format`` syntax. ``{}`` (or ``{0}``) and
    ``{elapsed}`` receive the measured value, ``{name}`` the function name and
    ``{unit}`` the unit suffix.

    Raises:
        InvalidFormatError: If the template is not a usable format string
    """
    if not isinstance(template, str):
        raise InvalidFormatError(
            f"FormatString must be a str, got {type(template).__name__}"
        )

    try:
        fields = [
            _FIELD_ROOT.match(field_name).group()
            for _, field_name, _, _ in string.Formatter().parse(template)
            if field_name is not None
        ]
    except ValueError as e:
        raise InvalidFormatError(f"Malformed FormatString {template!r}: {e}", cause=e) from e

    unknown = sorted(set(fields) - _KNOWN_FIELDS)
    if unknown:
        raise InvalidFormatError(
            f"Unknown placeholder(s) {', '.join(repr(f) for f in unknown)} in FormatString "
            f"{template!r}; use {{}}, {{elapsed}}, {{name}} or {{unit}}"
        )

    if not _ELAPSED_FIELDS.intersection(fields):
        raise InvalidFormatError(
            f"FormatString {template!r} has no placeholder for the elapsed time"
        )

    try:
        template.format(0, name="f", elapsed=0, unit=DEFAULT_UNIT.suffix)
    except (ValueError, IndexError, KeyError, AttributeError, TypeError) as e:
        raise InvalidFormatError(f"Malformed FormatString {template!r}: {e}", cause=e) from e

    return template


def validate_target(target: Any) -> None:
    """Ensure a decorator is being applied to a function.

    Raises:
        InvalidTargetError: If target is a class or any other non-function object
    """
    if inspect.isclass(target):
        raise InvalidTargetError(
            f"Statement other than function are not supported, got class {target.__name__}"
        )

    if not (inspect.isfunction(target) or inspect.ismethod(target) or inspect.isbuiltin(target)):
        raise InvalidTargetError(
            f"Statement other than function are not supported, got {type(target).__name__}"
        )


def parse_args(args: Sequence[Any]) -> tuple[TimeUnit, str]:
    """Turn decorator arguments into a (unit, format string) pair.

    Args:
        args: Zero, one (unit) or two (unit, format string) arguments

    Raises:
        ConfigurationError: If the arguments do not match the usage
    """
    if len(args) == 0:
        return DEFAULT_UNIT, DEFAULT_FORMAT
    if len(args) == 1:
        return parse_time_unit(args[0]), DEFAULT_FORMAT
    if len(args) == 2:
        return parse_time_unit(args[0]), validate_format(args[1])

    raise ConfigurationError(f"Invalid arguments, usage: {USAGE}", field="args")
