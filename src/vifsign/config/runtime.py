#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vifsign runtime configuration for CLI startup."""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"", "0", "false", "no", "off"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_flag(value: str | bool) -> bool:
    """Parse an on/off environment value."""
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")


@define
class VifRuntimeConfig(RuntimeConfig):
    """vifsign runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="VIFSIGN_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for vifsign operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    work_dir: str = field(
        default="",
        env_var="VIFSIGN_WORK_DIR",
        metadata={"help": "Root directory for per-run staging directories (default: system temp)"},
    )

    pause: bool = field(
        default=False,
        env_var="VIFSIGN_PAUSE",
        converter=parse_flag,
        metadata={"help": "Wait for a key press before exiting"},
    )

    def work_root(self) -> Path | None:
        """Configured staging root, or None to use the system temp directory."""
        if self.work_dir:
            return Path(self.work_dir).expanduser()
        return None


# 🔏📦🔚
