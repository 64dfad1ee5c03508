# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Model enumerations for cor_args.

This module defines the enumerations used by the logging layer: the output
format of log records and the component a record originates from. Each
handler variant reports under its own component so resolution traces can be
filtered per source.
"""

from __future__ import annotations

from cor_args.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        CHAIN: Chain assembly and dispatch.
        DEFAULT: Constant fallback handler.
        ENV: Process environment handler.
        ARG: Parsed command-line argument handler.
        FILE: Raw file contents handler.
        STRUCTURED: Structured (JSON/TOML) file handler.
        CONFIG: Pre-loaded configuration mapping handler.
    """

    CHAIN = "chain"
    DEFAULT = "default"
    ENV = "env"
    ARG = "arg"
    FILE = "file"
    STRUCTURED = "structured"
    CONFIG = "config"


__all__ = ["LogComponent", "LogFormat"]
