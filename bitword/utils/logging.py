# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import logging
import logging.handlers
import os
import re
from typing import Union

from bitword.constants import DEFAULT_LOG_LEVEL, DEFAULT_LOGGER_DIR

handler = None

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# Define a custom formatter without color codes
class NoColorFormatter(logging.Formatter):
    color_pattern = re.compile(r"\x1b[^m]*m")  # Regex pattern to match color codes

    def format(self, record):
        message = super().format(record)
        # Remove color codes from the log message
        message = self.color_pattern.sub("", message)
        return message


def build_logger(
    logger_name: str,
    logger_filename: str,
    logger_dir: str = DEFAULT_LOGGER_DIR,
    level: Union[int, str] = DEFAULT_LOG_LEVEL,
) -> logging.Logger:
    """
    Returns the named logger with console output on stderr and a rotating log file.

    The file handler is shared by the whole process; building the logger again
    with a different directory moves it there.
    """
    global handler

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    nocolor_formatter = NoColorFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Set the format of root handlers
    root = logging.getLogger()
    if len(root.handlers) == 0:
        logging.basicConfig(level=level, encoding="utf-8")
        root.handlers[0].setFormatter(formatter)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    filename = os.path.abspath(os.path.join(logger_dir, logger_filename))
    if handler is not None and handler.baseFilename != filename:
        for name, item in logging.root.manager.loggerDict.items():
            if isinstance(item, logging.Logger):
                item.removeHandler(handler)
        handler.close()
        handler = None

    # Add a file handler once per process
    if handler is None:
        os.makedirs(logger_dir, exist_ok=True)
        handler = logging.handlers.TimedRotatingFileHandler(
            filename, when="H", utc=True, encoding="utf-8"
        )
        handler.setFormatter(nocolor_formatter)
        handler.namer = lambda name: name.replace(".log", "") + ".log"
    if handler not in logger.handlers:
        logger.addHandler(handler)

    return logger
