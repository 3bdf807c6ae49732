#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vifsign configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from vifsign.config.runtime import VifRuntimeConfig

__all__ = [
    "VifRuntimeConfig",
]

# 🔏📦🔚
