# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import os
from typing import Any, Dict, List, Optional

import toml

from bitword.constants import DEFAULT_LOG_LEVEL, DEFAULT_LOGGER_DIR
from bitword.errors import error_config_invalid_value, error_config_unreadable

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BitwordConfig(object):
    def __init__(self, path: Optional[str] = None) -> None:

        # basic
        self.log_path: str = DEFAULT_LOGGER_DIR
        self.log_level: str = DEFAULT_LOG_LEVEL

        # cases
        self.builtin_cases: bool = True
        self.case_files: List[str] = []

        self.path = path
        if path is not None:
            self.read_toml(path)

    def _get(self, section: Dict[str, Any], key: str, default: Any, want: type) -> Any:
        value = section.get(key, default)
        if not isinstance(value, want):
            raise error_config_invalid_value(self.path, key, value, want.__name__)
        return value

    def _resolve(self, file_path: str) -> str:
        # Case files are relative to the config file.
        if os.path.isabs(file_path) or self.path is None:
            return file_path
        return os.path.join(os.path.dirname(os.path.abspath(self.path)), file_path)

    def read_toml(self, path: str) -> None:
        self.path = path
        try:
            config = toml.load(path)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            raise error_config_unreadable(path, e) from e

        if "basic" in config:
            basic = config["basic"]
            if not isinstance(basic, dict):
                raise error_config_invalid_value(path, "basic", basic, "table")
            self.log_path = self._get(basic, "log-path", self.log_path, str)
            log_level = self._get(basic, "log-level", self.log_level, str).upper()
            if log_level not in LOG_LEVELS:
                raise error_config_invalid_value(path, "log-level", log_level, " | ".join(LOG_LEVELS))
            self.log_level = log_level

        if "cases" in config:
            cases = config["cases"]
            if not isinstance(cases, dict):
                raise error_config_invalid_value(path, "cases", cases, "table")
            self.builtin_cases = self._get(cases, "builtin", self.builtin_cases, bool)
            files = self._get(cases, "files", self.case_files, list)
            for item in files:
                if not isinstance(item, str):
                    raise error_config_invalid_value(path, "files", item, "str")
            self.case_files = [self._resolve(f) for f in files]
