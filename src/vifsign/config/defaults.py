#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for vifsign."""

from __future__ import annotations

# =================================
# Document format
# =================================
LINE_SEPARATOR = "\n"
VIF_ENCODING = "utf-8"
UTF8_BOM = "\ufeff"
MIN_SIGNABLE_LINES = 2  # Header line plus footer line

# Whitespace as seen by .NET String.Trim(); excludes \x1c-\x1f unlike str.strip()
TRIM_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# =================================
# Signature
# =================================
DIGEST_ALGORITHM = "sha512"
DIGEST_SIZE = 64  # bytes

# =================================
# Archive
# =================================
ARCHIVE_SUFFIX = ".gz"

# =================================
# Work environment
# =================================
WORK_DIR_NAME = "vifsign"

# =================================
# Exit codes
# =================================
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2  # Matches click's own usage error code
EXIT_PATH_ERROR = 3
EXIT_OUTPUT_EXISTS = 4
EXIT_SIGNING_ERROR = 5
EXIT_ARCHIVE_ERROR = 6

# 🔏📦🔚
