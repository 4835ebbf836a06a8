"""Parsers turning raw environment strings into typed values.

Every parser either returns the decoded value or raises
:class:`getenvas.errors.ParseError`. None of them trim whitespace: the
accepted literals are exactly the canonical spellings listed below.
"""

from __future__ import annotations

import math
import re
import struct
from datetime import timedelta
from functools import partial
from typing import Any, Callable, Mapping

from getenvas.errors import OUT_OF_RANGE, ParseError

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)
_DURATION_PART_RE = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

DURATION_UNITS: Mapping[str, int] = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek small letter mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}
_MAX_DURATION_NS = (1 << 63) - 1
_MAX_DURATION_DIGITS = len(str(_MAX_DURATION_NS))
_MAX_FRACTION_DIGITS = 19


def parse_bool(raw: str) -> bool:
    """Parse ``1/t/T/TRUE/true/True`` or ``0/f/F/FALSE/false/False``."""
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ParseError(raw, "bool")


def _significant_digits(digits: str, limit: int, raw: str, type_name: str) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        raise ParseError(raw, type_name, OUT_OF_RANGE)
    return int(digits)


def parse_int(raw: str, bits: int = 32) -> int:
    """Parse a signed base-10 integer that fits in ``bits`` bits."""
    type_name = f"int{bits}"
    if not _INT_RE.fullmatch(raw):
        raise ParseError(raw, type_name)
    limit = 1 << (bits - 1)
    value = _significant_digits(raw.lstrip("+-"), limit, raw, type_name)
    if raw.startswith("-"):
        value = -value
    if not -limit <= value < limit:
        raise ParseError(raw, type_name, OUT_OF_RANGE)
    return value


def parse_uint(raw: str, bits: int = 32) -> int:
    """Parse an unsigned base-10 integer that fits in ``bits`` bits."""
    type_name = f"uint{bits}"
    if not _UINT_RE.fullmatch(raw):
        raise ParseError(raw, type_name)
    value = _significant_digits(raw, 1 << bits, raw, type_name)
    if value >= 1 << bits:
        raise ParseError(raw, type_name, OUT_OF_RANGE)
    return value


def _to_float32(value: float, raw: str) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ParseError(raw, "float32", OUT_OF_RANGE) from exc


def parse_float(raw: str, bits: int = 64) -> float:
    """Parse a decimal or hexadecimal float literal, ``inf`` or ``nan``.

    A finite literal too large for the target width is out of range;
    ``bits=32`` returns the value rounded to single precision.
    """
    type_name = f"float{bits}"
    if _SPECIAL_FLOAT_RE.fullmatch(raw):
        return float(raw)
    if _DECIMAL_FLOAT_RE.fullmatch(raw):
        value = float(raw)
    elif _HEX_FLOAT_RE.fullmatch(raw):
        try:
            value = float.fromhex(raw)
        except OverflowError as exc:
            raise ParseError(raw, type_name, OUT_OF_RANGE) from exc
    else:
        raise ParseError(raw, type_name)
    if math.isinf(value):
        raise ParseError(raw, type_name, OUT_OF_RANGE)
    if bits == 32:
        return _to_float32(value, raw)
    return value


def _duration_nanoseconds(raw: str) -> int:
    text = raw
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return 0
    if not text:
        raise ParseError(raw, "duration")

    total = 0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART_RE.match(text, pos)
        whole, frac, unit = match.group("whole"), match.group("frac") or "", match.group("unit")
        if not whole and not frac:
            raise ParseError(raw, "duration")
        scale = DURATION_UNITS.get(unit)
        if scale is None:
            # missing or unknown unit
            raise ParseError(raw, "duration")
        whole = whole.lstrip("0")
        if len(whole) > _MAX_DURATION_DIGITS:
            raise ParseError(raw, "duration", OUT_OF_RANGE)
        total += int(whole or "0") * scale
        frac = frac[:_MAX_FRACTION_DIGITS]
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()

    limit = _MAX_DURATION_NS + 1 if negative else _MAX_DURATION_NS
    if total > limit:
        raise ParseError(raw, "duration", OUT_OF_RANGE)
    return -total if negative else total


def parse_duration(raw: str) -> timedelta:
    """Parse a duration such as ``300ms``, ``-1.5h`` or ``2h45m``.

    Units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The
    total is computed in nanoseconds and truncated toward zero to the
    microsecond resolution of :class:`datetime.timedelta`.
    """
    nanos = _duration_nanoseconds(raw)
    micros = abs(nanos) // _MICROSECOND
    return timedelta(microseconds=-micros if nanos < 0 else micros)


PARSERS: Mapping[str, Callable[[str], Any]] = {
    "bool": parse_bool,
    "int32": partial(parse_int, bits=32),
    "uint32": partial(parse_uint, bits=32),
    "int64": partial(parse_int, bits=64),
    "uint64": partial(parse_uint, bits=64),
    "float32": partial(parse_float, bits=32),
    "float64": partial(parse_float, bits=64),
    "duration": parse_duration,
}
