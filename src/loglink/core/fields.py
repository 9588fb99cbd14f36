"""Field values and their canonical JSON tokens.

Values are classified once, on ingestion, into one of five variants.
Serialization is then a plain dispatch over the variant and never raises:
anything that cannot be rendered otherwise falls back to its repr.
"""

import json
import math
import numbers
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BoolValue:
    """A boolean field value."""

    value: bool


@dataclass(frozen=True)
class IntValue:
    """An integer field value of any width or signedness."""

    value: numbers.Integral


@dataclass(frozen=True)
class FloatValue:
    """A floating-point (or other real) field value."""

    value: numbers.Real


@dataclass(frozen=True)
class TextValue:
    """A value rendered through its display text (str(), exceptions)."""

    value: Any


@dataclass(frozen=True)
class OpaqueValue:
    """Anything else; rendered through its debug representation."""

    value: Any


FieldValue = BoolValue | IntValue | FloatValue | TextValue | OpaqueValue

_FIELD_VALUE_TYPES = (BoolValue, IntValue, FloatValue, TextValue, OpaqueValue)

# Strings used for non-finite floats, which JSON cannot carry unquoted
_NON_FINITE = {"nan": "NaN", "inf": "+Inf", "-inf": "-Inf"}


def _has_display_text(obj: Any) -> bool:
    if isinstance(obj, (str, BaseException)):
        return True
    return type(obj).__str__ is not object.__str__


def field_value(obj: Any) -> FieldValue:
    """Classify a raw value into its FieldValue variant.

    Values that are already FieldValue instances are returned unchanged.

    Args:
        obj: Any Python object supplied as a log field.

    Returns:
        The FieldValue variant wrapping obj.
    """
    if isinstance(obj, _FIELD_VALUE_TYPES):
        return obj
    # bool is an Integral, so it has to be checked first
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, numbers.Integral):
        return IntValue(obj)
    if isinstance(obj, numbers.Real):
        return FloatValue(obj)
    if _has_display_text(obj):
        return TextValue(obj)
    return OpaqueValue(obj)


def _quote(text: str, ensure_ascii: bool) -> str:
    return json.dumps(text, ensure_ascii=ensure_ascii)


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception:
        return f"<unrepresentable {type(obj).__name__}>"


def _format_int(value: numbers.Integral, ensure_ascii: bool) -> str:
    try:
        number = int(value)
    except Exception:
        return _quote(_safe_repr(value), ensure_ascii)
    try:
        return str(number)
    except ValueError:
        # int-to-str conversion limit for very long integers
        return _quote(f"<int with {number.bit_length()} bits>", ensure_ascii)


def _format_float(value: numbers.Real, ensure_ascii: bool) -> str:
    try:
        number = float(value)
    except Exception:
        return _quote(_safe_repr(value), ensure_ascii)
    if not math.isfinite(number):
        return _quote(_NON_FINITE[repr(number)], ensure_ascii)
    text = repr(number)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def serialize(value: FieldValue, ensure_ascii: bool = False) -> str:
    """Render a FieldValue as a JSON token.

    Booleans, integers and finite floats are unquoted. Display text and
    the repr fallback are JSON strings.

    Args:
        value: The classified field value.
        ensure_ascii: Escape non-ASCII characters in quoted output.

    Returns:
        A JSON token suitable for splicing into an object.
    """
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, IntValue):
        return _format_int(value.value, ensure_ascii)
    if isinstance(value, FloatValue):
        return _format_float(value.value, ensure_ascii)
    if isinstance(value, TextValue):
        try:
            return _quote(str(value.value), ensure_ascii)
        except Exception:
            return _quote(_safe_repr(value.value), ensure_ascii)
    return _quote(_safe_repr(value.value), ensure_ascii)


def serialize_value(obj: Any, ensure_ascii: bool = False) -> str:
    """Classify and render a raw value in one step."""
    return serialize(field_value(obj), ensure_ascii=ensure_ascii)
