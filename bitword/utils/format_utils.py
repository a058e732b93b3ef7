# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from typing import Any

from bitword.constants import FAIL_TAG, PASS_TAG, WORD_MASK


def to_binary(value: int) -> str:
    """
    Renders a word in binary without prefix or leading zeros.

    Args:
        value (int): The word. Bits above the word width are dropped.

    Returns:
        str: The minimal binary digits, "0" for zero.
    """
    return bin(value & WORD_MASK)[2:]


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_actual(kind: str, value: Any) -> str:
    if kind == "word":
        return "0b" + to_binary(value)
    elif kind == "bool":
        return format_bool(value)
    else:
        return str(value)


def format_expected(kind: str, value: Any) -> str:
    if kind == "word":
        return to_binary(value)
    elif kind == "bool":
        return format_bool(value)
    else:
        return str(value)


def format_header(bit_set: int, index: int) -> str:
    return f"=== bitSet=0b{to_binary(bit_set)}, index={index} ==="


def format_call(operation: str, bit_set: int, index: int, takes_index: bool) -> str:
    if takes_index:
        return f"{operation}(0b{to_binary(bit_set)}, {index})"
    return f"{operation}(0b{to_binary(bit_set)})"


def format_check_line(
    passed: bool,
    operation: str,
    kind: str,
    bit_set: int,
    index: int,
    takes_index: bool,
    actual: Any,
    expected: Any,
) -> str:
    tag = PASS_TAG if passed else FAIL_TAG
    call = format_call(operation, bit_set, index, takes_index)
    return f"{tag}: {call}={format_actual(kind, actual)}, want {format_expected(kind, expected)}"
