"""Typed environment variable lookups with defaults."""

import logging

from getenvas.env_utils import (
    AttrRef,
    Var,
    env_bool,
    env_bool_var,
    env_duration,
    env_duration_var,
    env_float32,
    env_float32_var,
    env_float64,
    env_float64_var,
    env_int,
    env_int64,
    env_int64_var,
    env_int_var,
    env_string,
    env_string_var,
    env_uint,
    env_uint64,
    env_uint64_var,
    env_uint_var,
)
from getenvas.errors import ParseError
from getenvas.key_prefix import KeyPrefix
from getenvas.parse_utils import (
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_uint,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AttrRef",
    "KeyPrefix",
    "ParseError",
    "Var",
    "env_bool",
    "env_bool_var",
    "env_duration",
    "env_duration_var",
    "env_float32",
    "env_float32_var",
    "env_float64",
    "env_float64_var",
    "env_int",
    "env_int64",
    "env_int64_var",
    "env_int_var",
    "env_string",
    "env_string_var",
    "env_uint",
    "env_uint64",
    "env_uint64_var",
    "env_uint_var",
    "parse_bool",
    "parse_duration",
    "parse_float",
    "parse_int",
    "parse_uint",
]
