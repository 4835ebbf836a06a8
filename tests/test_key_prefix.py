import os
import unittest
from datetime import timedelta
from unittest.mock import patch
import importlib

from _test_utils import add_repo_root_to_path

add_repo_root_to_path()

env_utils = importlib.import_module("getenvas.env_utils")
key_prefix = importlib.import_module("getenvas.key_prefix")
errors = importlib.import_module("getenvas.errors")

ACCESSORS = [
    ("env_bool", "1", False),
    ("env_int", "12", 0),
    ("env_uint", "12", 0),
    ("env_int64", "12", 0),
    ("env_uint64", "12", 0),
    ("env_float32", "1.5", 0.0),
    ("env_float64", "1.5", 0.0),
    ("env_duration", "2s", timedelta(0)),
]


class TestKeyPrefixBasics(unittest.TestCase):
    def test_get_set_and_attribute(self) -> None:
        prefix = key_prefix.KeyPrefix("APP_")
        self.assertEqual(prefix.get(), "APP_")
        prefix.set("SVC.")
        self.assertEqual(prefix.get(), "SVC.")
        self.assertEqual(prefix.prefix, "SVC.")

    def test_compose_is_plain_concatenation(self) -> None:
        self.assertEqual(key_prefix.KeyPrefix("APP").compose("NAME"), "APPNAME")
        self.assertEqual(key_prefix.KeyPrefix(" APP_ ").compose("NAME"), " APP_ NAME")
        self.assertEqual(key_prefix.KeyPrefix("").compose("NAME"), "NAME")
        self.assertEqual(key_prefix.KeyPrefix("APP_").compose(""), "APP_")

    def test_string_scenario(self) -> None:
        prefix = key_prefix.KeyPrefix("APP_")
        with patch.dict(os.environ, {"APP_NAME": "svc", "NAME": "other"}, clear=True):
            self.assertEqual(prefix.env_string("NAME", "default"), "svc")
            self.assertEqual(prefix.env_string("MISSING", "default"), "default")
            out = env_utils.Var()
            prefix.env_string_var(out, "NAME", "default")
        self.assertEqual(out.value, "svc")

    def test_set_affects_later_lookups(self) -> None:
        prefix = key_prefix.KeyPrefix("A_")
        with patch.dict(os.environ, {"A_PORT": "1", "B_PORT": "2"}, clear=True):
            self.assertEqual(prefix.env_int("PORT", 0), (1, None))
            prefix.set("B_")
            self.assertEqual(prefix.env_int("PORT", 0), (2, None))


class TestKeyPrefixDelegation(unittest.TestCase):
    def test_methods_match_module_accessors(self) -> None:
        prefix = key_prefix.KeyPrefix("APP_")
        for name, raw, default in ACCESSORS:
            for env in ({}, {"APP_X": raw}, {"APP_X": "garbage"}):
                with patch.dict(os.environ, env, clear=True):
                    expected = getattr(env_utils, name)("APP_X", default)
                    actual = getattr(prefix, name)("X", default)
                self.assertEqual(actual[0], expected[0], (name, env))
                self.assertEqual(type(actual[1]), type(expected[1]), (name, env))

    def test_var_methods_match_module_accessors(self) -> None:
        prefix = key_prefix.KeyPrefix("APP_")
        for name, raw, default in ACCESSORS:
            var_name = f"{name}_var"
            for env in ({}, {"APP_X": raw}, {"APP_X": "garbage"}):
                expected_out = env_utils.Var()
                actual_out = env_utils.Var()
                with patch.dict(os.environ, env, clear=True):
                    expected_err = getattr(env_utils, var_name)(expected_out, "APP_X", default)
                    actual_err = getattr(prefix, var_name)(actual_out, "X", default)
                self.assertEqual(actual_out.value, expected_out.value, (var_name, env))
                self.assertEqual(type(actual_err), type(expected_err), (var_name, env))

    def test_error_reports_composed_key(self) -> None:
        prefix = key_prefix.KeyPrefix("APP_")
        with patch.dict(os.environ, {"APP_PORT": "notanumber"}, clear=True):
            value, err = prefix.env_int("PORT", 8080)
        self.assertEqual(value, 8080)
        self.assertIsInstance(err, errors.ParseError)
        self.assertEqual(err.key, "APP_PORT")
