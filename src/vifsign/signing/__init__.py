#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Canonicalization and RSA signing of Version Information Files."""

from __future__ import annotations

from vifsign.signing.canonical import build_canonical_payload, compute_digest, split_lines
from vifsign.signing.keys import load_private_key
from vifsign.signing.signer import sign_digest, sign_vif

__all__ = [
    "build_canonical_payload",
    "compute_digest",
    "load_private_key",
    "sign_digest",
    "sign_vif",
    "split_lines",
]

# 🔏📦🔚
