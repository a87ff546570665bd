"""
services/preference_values.py

Tagged values held by preferences and the lenient coercions applied by the
typed getters. ``Absent`` means "not set, use the default" and is kept
apart from present-but-empty values such as ``StrValue("")``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union


@dataclass(frozen=True, slots=True)
class Absent:
    python_type: ClassVar[Optional[type]] = None

    @property
    def value(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool
    python_type: ClassVar[Optional[type]] = bool


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int
    python_type: ClassVar[Optional[type]] = int


@dataclass(frozen=True, slots=True)
class StrValue:
    value: str
    python_type: ClassVar[Optional[type]] = str


PreferenceValue = Union[Absent, BoolValue, IntValue, StrValue]

ABSENT = Absent()

_TRUE_PREFIX_RE = re.compile(r'\s*(?:[YyTt]|[+-]?0*[1-9])')
_INT_PREFIX_RE = re.compile(r'\s*([+-]?\d+)')


def wrap(raw: Any) -> PreferenceValue:
    """Wrap a raw store value in the matching tagged value.

    ``None`` maps to ``ABSENT``. Raises TypeError for anything that is not a
    bool, int or str.
    """
    if raw is None:
        return ABSENT
    # bool first: bool is an int subclass
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, int):
        return IntValue(raw)
    if isinstance(raw, str):
        return StrValue(raw)
    raise TypeError(f"Unsupported preference value type: {type(raw).__name__}")


def to_bool(value: PreferenceValue) -> bool:
    """
    Coerces leniently to bool.

    Strings are true when they start (after whitespace) with Y/y/T/t or
    with an optionally signed number whose first significant digit is 1-9.
    """
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, IntValue):
        return value.value != 0
    if isinstance(value, StrValue):
        return _TRUE_PREFIX_RE.match(value.value) is not None
    return False


def to_int(value: PreferenceValue) -> int:
    """Coerces leniently to int; strings contribute their leading digits or 0."""
    if isinstance(value, BoolValue):
        return int(value.value)
    if isinstance(value, IntValue):
        return value.value
    if isinstance(value, StrValue):
        match = _INT_PREFIX_RE.match(value.value)
        return int(match.group(1)) if match else 0
    return 0


def to_str(value: PreferenceValue) -> Optional[str]:
    if isinstance(value, StrValue):
        return value.value
    if isinstance(value, BoolValue):
        return "1" if value.value else "0"
    if isinstance(value, IntValue):
        return str(value.value)
    return None
