#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vifsign: sign and gzip plugin Version Information Files."""

from __future__ import annotations

from provide.foundation.utils import get_version

from vifsign.archive import gzip_file
from vifsign.exceptions import (
    ArchivingError,
    KeyFormatError,
    OutputExistsError,
    SigningError,
    VifPathError,
    VifSignError,
)
from vifsign.pipeline import PreparedVif, prepare_vif
from vifsign.signing import build_canonical_payload, sign_vif

__version__ = get_version("vifsign", caller_file=__file__)

__all__ = [
    "ArchivingError",
    "KeyFormatError",
    "OutputExistsError",
    "PreparedVif",
    "SigningError",
    "VifPathError",
    "VifSignError",
    "__version__",
    "build_canonical_payload",
    "gzip_file",
    "prepare_vif",
    "sign_vif",
]

# 🔏📦🔚
