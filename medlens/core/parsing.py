"""
Lenient value coercion for untrusted model output.

Every helper here is total: it returns a fallback instead of raising, so the
extraction schema can map any JSON shape onto the closed-world record types.
"""

import json
import math
import re
from datetime import date
from enum import Enum
from typing import Any, List, Optional, Type, TypeVar, Union

E = TypeVar("E", bound=Enum)

# Leading decimal prefix, as accepted by a standard float parse of "142 mg/dL"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_number(value: Any) -> bool:
    """True for int/float input. JSON booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def finite_float(value: Union[int, float]) -> Optional[float]:
    """Float form of a number, or None if it overflows or is not finite."""
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def parse_float_prefix(value: Any) -> Optional[float]:
    """
    Parse the leading numeric prefix of a value.

    Returns None when nothing numeric leads the value or the result is not
    finite. Numbers pass through as floats.
    """
    if is_number(value):
        return finite_float(value)

    if not isinstance(value, str):
        return None

    match = _FLOAT_PREFIX.match(value.lstrip())
    if not match:
        return None

    number = float(match.group(0))
    return number if math.isfinite(number) else None


def parse_lab_value(value: Any) -> Union[float, str]:
    """Numeric if the value is (or starts with) a finite number, else its text form."""
    if is_number(value):
        number = finite_float(value)
        return number if number is not None else coerce_text(value)

    if isinstance(value, str):
        number = parse_float_prefix(value)
        return number if number is not None else value

    return coerce_text(value)


def coerce_text(value: Any, default: str = "") -> str:
    """Text form of a scalar; None and empty containers become the default."""
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return str(value)
    if not value:
        return default
    return json.dumps(value)


def coerce_optional_text(value: Any) -> Optional[str]:
    """Like coerce_text but absent or blank values become None."""
    text = coerce_text(value)
    return text if text.strip() else None


def coerce_enum(value: Any, enum_cls: Type[E], default: Optional[E]) -> Optional[E]:
    """Exact member match on the enum value, otherwise the default."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            return default
    return default


def coerce_list(value: Any) -> List[Any]:
    """Lists pass through; anything else (including absent) is an empty list."""
    if isinstance(value, list):
        return value
    return []


def coerce_records(value: Any) -> List[dict]:
    """List of JSON objects; non-object entries are dropped."""
    return [item for item in coerce_list(value) if isinstance(item, dict)]


def document_date_key(value: str) -> date:
    """Sort key for a document date; dates that do not parse sort before every real date."""
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return date.min
