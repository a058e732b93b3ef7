# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from typing import Any, Dict, List, NamedTuple, Tuple

import toml

from bitword.constants import WORD_MASK
from bitword.errors import (
    error_case_invalid_value,
    error_case_missing_key,
    error_config_unreadable,
)


class TestCase(NamedTuple):
    # Keep pytest from collecting this record as a test class.
    __test__ = False

    bit_set: int
    index: int
    add_result: int
    remove_result: int
    contains_result: bool
    size_result: int
    is_empty_result: bool
    clear_result: int = 0
    label: str = ""

    def expected(self, operation: str) -> Any:
        return getattr(self, EXPECTED_FIELDS[operation])


EXPECTED_FIELDS: Dict[str, str] = {
    "add": "add_result",
    "remove": "remove_result",
    "contains": "contains_result",
    "size": "size_result",
    "isEmpty": "is_empty_result",
    "clear": "clear_result",
}

DEFAULT_CASES: Tuple[TestCase, ...] = (
    TestCase(0b0000, 0, 0b0001, 0b0000, False, 0, True, 0, "{}"),
    TestCase(0b0000, 1, 0b0010, 0b0000, False, 0, True, 0, "{}"),
    TestCase(0b0000, 2, 0b0100, 0b0000, False, 0, True, 0, "{}"),
    TestCase(0b0000, 3, 0b1000, 0b0000, False, 0, True, 0, "{}"),
    TestCase(0b1111, 0, 0b1111, 0b1110, True, 4, False, 0, "{0, 1, 2, 3}"),
    TestCase(0b1111, 1, 0b1111, 0b1101, True, 4, False, 0, "{0, 1, 2, 3}"),
    TestCase(0b1111, 2, 0b1111, 0b1011, True, 4, False, 0, "{0, 1, 2, 3}"),
    TestCase(0b1111, 3, 0b1111, 0b0111, True, 4, False, 0, "{0, 1, 2, 3}"),
    TestCase(0b1001, 0, 0b1001, 0b1000, True, 2, False, 0, "{0, 3}"),
    TestCase(0b1001, 1, 0b1011, 0b1001, False, 2, False, 0, "{0, 3}"),
    TestCase(0b1001, 2, 0b1101, 0b1001, False, 2, False, 0, "{0, 3}"),
    TestCase(0b1001, 3, 0b1001, 0b0001, True, 2, False, 0, "{0, 3}"),
    TestCase(0b0110, 0, 0b0111, 0b0110, False, 2, False, 0, "{1, 2}"),
    TestCase(0b0110, 1, 0b0110, 0b0100, True, 2, False, 0, "{1, 2}"),
    TestCase(0b0110, 2, 0b0110, 0b0010, True, 2, False, 0, "{1, 2}"),
    TestCase(0b0110, 3, 0b1110, 0b0110, False, 2, False, 0, "{1, 2}"),
    TestCase(0b0011, 0, 0b0011, 0b0010, True, 2, False, 0, "{0, 1}"),
    TestCase(0b0011, 1, 0b0011, 0b0001, True, 2, False, 0, "{0, 1}"),
    TestCase(0b0011, 2, 0b0111, 0b0011, False, 2, False, 0, "{0, 1}"),
    TestCase(0b0011, 3, 0b1011, 0b0011, False, 2, False, 0, "{0, 1}"),
    TestCase(0b0001, 0, 0b0001, 0b0000, True, 1, False, 0, "{0}"),
    TestCase(0b0001, 1, 0b0011, 0b0001, False, 1, False, 0, "{0}"),
    TestCase(0b0001, 2, 0b0101, 0b0001, False, 1, False, 0, "{0}"),
    TestCase(0b0001, 3, 0b1001, 0b0001, False, 1, False, 0, "{0}"),
)

# toml key -> (TestCase field, expected type, required)
CASE_KEYS: Dict[str, Tuple[str, type, bool]] = {
    "bit-set": ("bit_set", int, True),
    "index": ("index", int, True),
    "add": ("add_result", int, True),
    "remove": ("remove_result", int, True),
    "contains": ("contains_result", bool, True),
    "size": ("size_result", int, True),
    "is-empty": ("is_empty_result", bool, True),
    "clear": ("clear_result", int, False),
    "label": ("label", str, False),
}

# Keys holding a whole word rather than an index or count.
WORD_KEYS = ("bit-set", "add", "remove", "clear")


def _check_type(value: Any, want: type) -> bool:
    # bool is an int subclass; keep them apart.
    if want is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, want)


def case_from_dict(data: Dict[str, Any], path: str = "<dict>", position: int = 0) -> TestCase:
    fields = {}
    for key, (field, want, required) in CASE_KEYS.items():
        if key not in data:
            if required:
                raise error_case_missing_key(path, position, key)
            continue
        value = data[key]
        if not _check_type(value, want):
            raise error_case_invalid_value(path, position, key, value, want.__name__)
        if want is int and value < 0:
            raise error_case_invalid_value(path, position, key, value, "non-negative int")
        if key in WORD_KEYS and value > WORD_MASK:
            raise error_case_invalid_value(path, position, key, value, "word in [0, 2**32)")
        fields[field] = value
    return TestCase(**fields)


def load_cases(path: str) -> List[TestCase]:
    """
    Loads extra test cases from a TOML file.

    Args:
        path (str): File holding an array of ``[[case]]`` tables.

    Returns:
        List[TestCase]: The cases in file order.

    Raises:
        ConfigError: If the file cannot be parsed or a case is malformed.
    """
    try:
        data = toml.load(path)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
        raise error_config_unreadable(path, e) from e

    items = data.get("case", [])
    if not isinstance(items, list):
        raise error_config_unreadable(path, "'case' must be an array of tables")
    cases = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise error_case_invalid_value(path, i + 1, "case", item, "table")
        cases.append(case_from_dict(item, path, i + 1))
    return cases
