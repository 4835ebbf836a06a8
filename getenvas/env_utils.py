"""Environment variable accessors with typed parsing and defaults.

Each typed accessor returns ``(value, error)``: the parsed value and ``None``
when the variable is set to a valid literal, the default and ``None`` when it
is unset, and the default together with a :class:`ParseError` when it is set
but malformed. The ``*_var`` forms write the same value into an output slot
and return only the error.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Generic, Optional, Protocol, Tuple, TypeVar

from getenvas.errors import ParseError
from getenvas.parse_utils import PARSERS

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Result = Tuple[T, Optional[ParseError]]


class Slot(Protocol[T_contra]):
    """Anything an out-parameter accessor can assign into."""

    def set(self, value: T_contra) -> None:
        ...


@dataclass
class Var(Generic[T]):
    """A mutable cell receiving the result of a ``*_var`` accessor."""

    value: Optional[T] = None

    def set(self, value: T) -> None:
        self.value = value


@dataclass
class AttrRef:
    """Assign into an attribute of an existing object, e.g. a config field."""

    obj: Any
    name: str

    def set(self, value: Any) -> None:
        setattr(self.obj, self.name, value)

    def get(self) -> Any:
        return getattr(self.obj, self.name)


def _getenv(key: str) -> Optional[str]:
    try:
        return os.environ.get(key)
    except UnicodeEncodeError:
        # keys the OS cannot represent are never set
        return None


def _lookup(key: str, default: T, type_name: str) -> Result[T]:
    raw = _getenv(key)
    if raw is None:
        return default, None
    parser: Callable[[str], T] = PARSERS[type_name]
    try:
        return parser(raw), None
    except ParseError as exc:
        exc.key = key
        logger.debug("%s=%r is not a valid %s; using default", key, raw, type_name)
        return default, exc


def _assign(out: Slot[T], key: str, default: T, type_name: str) -> Optional[ParseError]:
    value, err = _lookup(key, default, type_name)
    out.set(value)
    return err


def env_string(key: str, default: str) -> str:
    """Read a string environment variable; strings never fail to parse."""
    raw = _getenv(key)
    return default if raw is None else raw


def env_string_var(out: Slot[str], key: str, default: str) -> None:
    """Assign a string environment variable (or the default) into ``out``."""
    out.set(env_string(key, default))


def env_bool(key: str, default: bool) -> Result[bool]:
    """Read a boolean environment variable (``1/t/true``, ``0/f/false``)."""
    return _lookup(key, default, "bool")


def env_bool_var(out: Slot[bool], key: str, default: bool) -> Optional[ParseError]:
    """Assign a boolean environment variable into ``out``."""
    return _assign(out, key, default, "bool")


def env_int(key: str, default: int) -> Result[int]:
    """Read a signed 32-bit integer environment variable."""
    return _lookup(key, default, "int32")


def env_int_var(out: Slot[int], key: str, default: int) -> Optional[ParseError]:
    """Assign a signed 32-bit integer environment variable into ``out``."""
    return _assign(out, key, default, "int32")


def env_uint(key: str, default: int) -> Result[int]:
    """Read an unsigned 32-bit integer environment variable."""
    return _lookup(key, default, "uint32")


def env_uint_var(out: Slot[int], key: str, default: int) -> Optional[ParseError]:
    """Assign an unsigned 32-bit integer environment variable into ``out``."""
    return _assign(out, key, default, "uint32")


def env_int64(key: str, default: int) -> Result[int]:
    """Read a signed 64-bit integer environment variable."""
    return _lookup(key, default, "int64")


def env_int64_var(out: Slot[int], key: str, default: int) -> Optional[ParseError]:
    """Assign a signed 64-bit integer environment variable into ``out``."""
    return _assign(out, key, default, "int64")


def env_uint64(key: str, default: int) -> Result[int]:
    """Read an unsigned 64-bit integer environment variable."""
    return _lookup(key, default, "uint64")


def env_uint64_var(out: Slot[int], key: str, default: int) -> Optional[ParseError]:
    """Assign an unsigned 64-bit integer environment variable into ``out``."""
    return _assign(out, key, default, "uint64")


def env_float32(key: str, default: float) -> Result[float]:
    """Read a single precision float environment variable."""
    return _lookup(key, default, "float32")


def env_float32_var(out: Slot[float], key: str, default: float) -> Optional[ParseError]:
    """Assign a single precision float environment variable into ``out``."""
    return _assign(out, key, default, "float32")


def env_float64(key: str, default: float) -> Result[float]:
    """Read a double precision float environment variable."""
    return _lookup(key, default, "float64")


def env_float64_var(out: Slot[float], key: str, default: float) -> Optional[ParseError]:
    """Assign a double precision float environment variable into ``out``."""
    return _assign(out, key, default, "float64")


def env_duration(key: str, default: timedelta) -> Result[timedelta]:
    """Read a duration environment variable such as ``1h30m`` or ``250ms``."""
    return _lookup(key, default, "duration")


def env_duration_var(
    out: Slot[timedelta],
    key: str,
    default: timedelta,
) -> Optional[ParseError]:
    """Assign a duration environment variable into ``out``."""
    return _assign(out, key, default, "duration")
