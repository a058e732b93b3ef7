# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import argparse
import sys
from typing import List, Optional

from bitword.cases import DEFAULT_CASES, TestCase, load_cases
from bitword.configs import BitwordConfig
from bitword.constants import (
    DEFAULT_LOGGER_DIR,
    DEFAULT_LOGGER_FILE,
    DEFAULT_LOGGER_NAME,
    EXIT_MISMATCH,
    EXIT_OK,
    EXIT_USAGE,
)
from bitword.errors import BitwordError, error_no_cases
from bitword.runner import SelfTestRunner
from bitword.utils.logging import build_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitword",
        description="Bitword self-test: checks the word bit-set operations against a table of cases.",
    )
    parser.add_argument("--config", "-c", type=str, default="", help="The path of a TOML config file")
    parser.add_argument("--cases", type=str, action="append", default=[], help="A TOML file of extra cases, run after the built-in ones (repeatable)")
    parser.add_argument("--no-builtin", action="store_true", help="Skip the built-in case table")
    parser.add_argument("--log-path", type=str, default=DEFAULT_LOGGER_DIR, help="The folder to save logs")
    return parser


def init(argv: Optional[List[str]] = None) -> BitwordConfig:
    parser = build_parser()
    args = parser.parse_args(argv)

    def is_default_value(args, arg_name):
        if hasattr(args, arg_name):
            arg_value = getattr(args, arg_name)
            arg_default = parser.get_default(arg_name)
            return arg_value == arg_default
        return False

    if args.config != "":
        config = BitwordConfig(args.config)
    else:
        config = BitwordConfig()

    if not is_default_value(args, "log_path"):
        config.log_path = args.log_path
    if not is_default_value(args, "no_builtin"):
        config.builtin_cases = False
    if not is_default_value(args, "cases"):
        config.case_files = config.case_files + args.cases

    return config


def collect_cases(config: BitwordConfig) -> List[TestCase]:
    cases: List[TestCase] = []
    if config.builtin_cases:
        cases.extend(DEFAULT_CASES)
    for path in config.case_files:
        cases.extend(load_cases(path))
    if len(cases) == 0:
        raise error_no_cases()
    return cases


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = init(argv)
    except BitwordError as e:
        print(f"bitword: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger = build_logger(
        DEFAULT_LOGGER_NAME, DEFAULT_LOGGER_FILE, logger_dir=config.log_path, level=config.log_level
    )
    try:
        cases = collect_cases(config)
    except BitwordError as e:
        logger.error(str(e))
        return EXIT_USAGE

    summary = SelfTestRunner(cases, logger=logger).run()
    return EXIT_OK if summary.ok else EXIT_MISMATCH


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
