#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers shared by vifsign commands."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import pout
from provide.foundation.logger import get_logger


def get_command_logger(command: str) -> Any:
    """Return a structured logger named after a CLI command."""
    return get_logger(f"vifsign.commands.{command}")


def wait_for_key(message: str = "Press any key to exit...") -> None:
    """Block until the operator presses a key."""
    pout(message)
    click.getchar()


# 🔏📦🔚
