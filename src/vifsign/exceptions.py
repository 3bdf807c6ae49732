#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for vifsign."""

from __future__ import annotations

from provide.foundation.errors import FoundationError

from vifsign.config.defaults import (
    EXIT_ARCHIVE_ERROR,
    EXIT_FAILURE,
    EXIT_OUTPUT_EXISTS,
    EXIT_PATH_ERROR,
    EXIT_SIGNING_ERROR,
)


class VifSignError(FoundationError):
    """Base exception for all vifsign errors."""

    exit_code: int = EXIT_FAILURE


class VifPathError(VifSignError):
    """Raised when an input path is missing or is not a regular file."""

    exit_code = EXIT_PATH_ERROR


class OutputExistsError(VifSignError):
    """Raised when the destination artifact already exists."""

    exit_code = EXIT_OUTPUT_EXISTS


class SigningError(VifSignError):
    """Raised for errors while canonicalizing or signing a VIF."""

    exit_code = EXIT_SIGNING_ERROR


class KeyFormatError(SigningError):
    """Raised when the private key file cannot be parsed as an RSA key."""

    pass


class ArchivingError(VifSignError):
    """Raised for I/O errors while compressing or copying the signed VIF."""

    exit_code = EXIT_ARCHIVE_ERROR


# 🔏📦🔚
