# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
Set of small non-negative integers stored as the bits of one word.

Every function is pure: the word passed in is never changed and a new word
is returned. ``index`` must lie in ``[0, WORD_WIDTH)``; this is not checked,
an index past the top of the word falls outside the mask and has no effect.
"""

from typing import Callable, Dict, Literal, NamedTuple

from bitword.constants import WORD_MASK


def _word(bit_set: int) -> int:
    return bit_set & WORD_MASK


def add(bit_set: int, index: int) -> int:
    """Adds bit into set."""
    return _word(bit_set | (1 << index))


def remove(bit_set: int, index: int) -> int:
    """Removes bit from set."""
    return _word(bit_set & ~(1 << index))


def contains(bit_set: int, index: int) -> bool:
    """Checks if set contains bit."""
    return bool((_word(bit_set) >> index) & 1)


def size(bit_set: int) -> int:
    """Number of bits in set."""
    return _word(bit_set).bit_count()


def is_empty(bit_set: int) -> bool:
    """Checks if set is empty."""
    return _word(bit_set) == 0


def clear(bit_set: int) -> int:
    """Removes all bits from set."""
    return 0


class Operation(NamedTuple):
    name: str
    func: Callable
    takes_index: bool
    # How results are rendered in a report line.
    kind: Literal["word", "bool", "count"]

    def __call__(self, bit_set: int, index: int):
        if self.takes_index:
            return self.func(bit_set, index)
        return self.func(bit_set)


# Report order.
OPERATIONS: Dict[str, Operation] = {
    "add": Operation("add", add, True, "word"),
    "remove": Operation("remove", remove, True, "word"),
    "contains": Operation("contains", contains, True, "bool"),
    "size": Operation("size", size, False, "count"),
    "isEmpty": Operation("isEmpty", is_empty, False, "bool"),
    "clear": Operation("clear", clear, False, "word"),
}
