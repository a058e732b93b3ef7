# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from typing import Any, NamedTuple


class BitwordError(Exception):
    pass


class ConfigError(BitwordError):
    pass


class AssertionMismatch(NamedTuple):
    """A computed result that differs from the expected one. Reported, never raised."""

    operation: str
    bit_set: int
    index: int
    actual: Any
    expected: Any

    def __str__(self) -> str:
        return (
            f"{self.operation} mismatch for bitSet={self.bit_set:#b}, index={self.index}: "
            f"got {self.actual!r}, want {self.expected!r}"
        )


def error_config_unreadable(path: str, reason: Any) -> ConfigError:
    return ConfigError(f"Cannot read config file {path}: {reason}")


def error_config_invalid_value(path: str, key: str, value: Any, want: str) -> ConfigError:
    return ConfigError(f"Invalid value for '{key}' in {path}: {value!r} (expected {want})")


def error_case_missing_key(path: str, position: int, key: str) -> ConfigError:
    return ConfigError(f"Case #{position} in {path} is missing '{key}'")


def error_case_invalid_value(path: str, position: int, key: str, value: Any, want: str) -> ConfigError:
    return ConfigError(
        f"Case #{position} in {path} has invalid '{key}': {value!r} (expected {want})"
    )


def error_no_cases() -> ConfigError:
    return ConfigError("No test cases to run: the built-in table is disabled and no case file was given")
