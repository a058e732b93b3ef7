# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging
import sys
from typing import Any, List, NamedTuple, Optional, Sequence, TextIO

from bitword.cases import TestCase
from bitword.constants import DEFAULT_LOGGER_NAME
from bitword.errors import AssertionMismatch
from bitword.ops.bitset import OPERATIONS, Operation
from bitword.utils.format_utils import format_check_line, format_header


class CheckResult(NamedTuple):
    case: TestCase
    operation: Operation
    actual: Any
    expected: Any

    @property
    def passed(self) -> bool:
        return self.actual == self.expected

    def to_mismatch(self) -> AssertionMismatch:
        return AssertionMismatch(
            self.operation.name, self.case.bit_set, self.case.index, self.actual, self.expected
        )

    def format(self) -> str:
        return format_check_line(
            self.passed,
            self.operation.name,
            self.operation.kind,
            self.case.bit_set,
            self.case.index,
            self.operation.takes_index,
            self.actual,
            self.expected,
        )


class RunSummary(object):
    def __init__(self) -> None:
        self.total = 0
        self.passed = 0
        self.mismatches: List[AssertionMismatch] = []

    @property
    def failed(self) -> int:
        return len(self.mismatches)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def record(self, result: CheckResult) -> None:
        self.total += 1
        if result.passed:
            self.passed += 1
        else:
            self.mismatches.append(result.to_mismatch())

    def __str__(self) -> str:
        return f"{self.total} checks, {self.passed} passed, {self.failed} failed"


class SelfTestRunner(object):
    """
    Runs every operation against every case and writes one report line per check.

    Mismatches are written, logged and collected; they never stop the run.
    """

    def __init__(
        self,
        cases: Sequence[TestCase],
        out: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.cases = tuple(cases)
        self.out = out
        self.logger = logger if logger is not None else logging.getLogger(DEFAULT_LOGGER_NAME)

    def _write(self, line: str) -> None:
        out = self.out if self.out is not None else sys.stdout
        out.write(line + "\n")

    def check_case(self, case: TestCase) -> List[CheckResult]:
        results = []
        for name, operation in OPERATIONS.items():
            actual = operation(case.bit_set, case.index)
            results.append(CheckResult(case, operation, actual, case.expected(name)))
        return results

    def run(self) -> RunSummary:
        summary = RunSummary()
        self.logger.debug(f"Running {len(self.cases)} cases.")
        for case in self.cases:
            self._write(format_header(case.bit_set, case.index))
            for result in self.check_case(case):
                self._write(result.format())
                summary.record(result)
                if not result.passed:
                    self.logger.warning(str(result.to_mismatch()))
        if summary.ok:
            self.logger.info(f"All passed: {summary}.")
        else:
            self.logger.info(f"Failures found: {summary}.")
        return summary
