# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

# Words are unsigned; results are reduced modulo 2**WORD_WIDTH.
WORD_WIDTH = 32
WORD_MASK = (1 << WORD_WIDTH) - 1

PASS_TAG = "    PASS"
FAIL_TAG = "FAIL"

DEFAULT_LOGGER_DIR = "./logs"
DEFAULT_LOGGER_NAME = "bitword"
DEFAULT_LOGGER_FILE = "bitword.log"
DEFAULT_LOG_LEVEL = "INFO"

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2
