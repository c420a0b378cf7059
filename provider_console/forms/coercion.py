"""
Typed coercion of raw form text against a settings field's declared type.

Each FieldKind has exactly one coercion function. Unrecognised type tags
classify as TEXT and pass through untouched, so coercion of a TEXT field
never fails.
"""

import math
import re
from typing import Any, Callable

from ..data.models import FieldKind, SettingField
from ..errors import FieldError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})

# Integers must survive JSON encoding as signed 64-bit values
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
_MAX_INTEGER_DIGITS = 19


def _integer_error(setting: SettingField, raw: str) -> FieldError:
    return FieldError(f"{setting.name} must be an integer",
                      field_name=setting.name, raw_value=raw)


def coerce_int(setting: SettingField, raw: str) -> int:
    """Parse a base-10 signed 64-bit integer; fractional, non-numeric or out-of-range input fails."""
    trimmed = raw.strip()
    if not _INTEGER_RE.fullmatch(trimmed):
        raise _integer_error(setting, raw)
    sign = -1 if trimmed.startswith("-") else 1
    digits = trimmed.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INTEGER_DIGITS:
        raise _integer_error(setting, raw)
    value = sign * int(digits, 10)
    if not INT_MIN <= value <= INT_MAX:
        raise _integer_error(setting, raw)
    return value


def coerce_float(setting: SettingField, raw: str) -> float:
    """Parse a finite decimal number, optionally with an exponent."""
    trimmed = raw.strip()
    if not _NUMBER_RE.fullmatch(trimmed):
        raise FieldError(f"{setting.name} must be a number",
                         field_name=setting.name, raw_value=raw)
    value = float(trimmed)
    if not math.isfinite(value):
        raise FieldError(f"{setting.name} must be a number",
                         field_name=setting.name, raw_value=raw)
    return value


def coerce_bool(setting: SettingField, raw: str) -> bool:
    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise FieldError(f"{setting.name} must be a boolean",
                     field_name=setting.name, raw_value=raw)


def coerce_text(setting: SettingField, raw: str) -> str:
    return raw


FIELD_COERCERS: dict[FieldKind, Callable[[SettingField, str], Any]] = {
    FieldKind.INT: coerce_int,
    FieldKind.FLOAT: coerce_float,
    FieldKind.BOOL: coerce_bool,
    FieldKind.TEXT: coerce_text,
}


def coerce(setting: SettingField, raw: str) -> Any:
    """
    Coerce a raw form value into the setting's typed value.

    Args:
        setting: Field declaration from the adapter's settings schema
        raw: Text as entered by the operator

    Returns:
        int, float, bool, or the unchanged raw string for text fields

    Raises:
        FieldError: If the value cannot be interpreted as the declared type
    """
    return FIELD_COERCERS[setting.kind](setting, raw)
