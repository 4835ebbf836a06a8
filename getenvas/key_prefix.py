"""Namespace a group of environment lookups under a shared prefix."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from getenvas import env_utils
from getenvas.env_utils import Result, Slot
from getenvas.errors import ParseError


@dataclass
class KeyPrefix:
    """Prepend ``prefix`` to every key before delegating to :mod:`env_utils`.

    The prefix is used verbatim; no separator is inserted, so
    ``KeyPrefix("APP_").env_string("NAME", "")`` reads ``APP_NAME``. Instances
    carry no locking; share one across threads only if nobody calls
    :meth:`set` concurrently.
    """

    prefix: str

    def get(self) -> str:
        """Return the current prefix."""
        return self.prefix

    def set(self, prefix: str) -> None:
        """Replace the prefix used by subsequent lookups."""
        self.prefix = prefix

    def compose(self, key: str) -> str:
        """Return ``prefix + key``."""
        return self.prefix + key

    def env_string(self, key: str, default: str) -> str:
        return env_utils.env_string(self.compose(key), default)

    def env_string_var(self, out: Slot[str], key: str, default: str) -> None:
        env_utils.env_string_var(out, self.compose(key), default)

    def env_bool(self, key: str, default: bool) -> Result[bool]:
        return env_utils.env_bool(self.compose(key), default)

    def env_bool_var(self, out: Slot[bool], key: str, default: bool) -> Optional[ParseError]:
        return env_utils.env_bool_var(out, self.compose(key), default)

    def env_int(self, key: str, default: int) -> Result[int]:
        return env_utils.env_int(self.compose(key), default)

    def env_int_var(self, out: Slot[int], key: str, default: int) -> Optional[ParseError]:
        return env_utils.env_int_var(out, self.compose(key), default)

    def env_uint(self, key: str, default: int) -> Result[int]:
        return env_utils.env_uint(self.compose(key), default)

    def env_uint_var(self, out: Slot[int], key: str, default: int) -> Optional[ParseError]:
        return env_utils.env_uint_var(out, self.compose(key), default)

    def env_int64(self, key: str, default: int) -> Result[int]:
        return env_utils.env_int64(self.compose(key), default)

    def env_int64_var(self, out: Slot[int], key: str, default: int) -> Optional[ParseError]:
        return env_utils.env_int64_var(out, self.compose(key), default)

    def env_uint64(self, key: str, default: int) -> Result[int]:
        return env_utils.env_uint64(self.compose(key), default)

    def env_uint64_var(self, out: Slot[int], key: str, default: int) -> Optional[ParseError]:
        return env_utils.env_uint64_var(out, self.compose(key), default)

    def env_float32(self, key: str, default: float) -> Result[float]:
        return env_utils.env_float32(self.compose(key), default)

    def env_float32_var(
        self, out: Slot[float], key: str, default: float
    ) -> Optional[ParseError]:
        return env_utils.env_float32_var(out, self.compose(key), default)

    def env_float64(self, key: str, default: float) -> Result[float]:
        return env_utils.env_float64(self.compose(key), default)

    def env_float64_var(
        self, out: Slot[float], key: str, default: float
    ) -> Optional[ParseError]:
        return env_utils.env_float64_var(out, self.compose(key), default)

    def env_duration(self, key: str, default: timedelta) -> Result[timedelta]:
        return env_utils.env_duration(self.compose(key), default)

    def env_duration_var(
        self, out: Slot[timedelta], key: str, default: timedelta
    ) -> Optional[ParseError]:
        return env_utils.env_duration_var(out, self.compose(key), default)
