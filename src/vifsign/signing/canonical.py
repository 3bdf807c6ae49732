#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Canonical payload reconstruction for Version Information Files.

A VIF is a line-oriented text file. The first line carries the signature and
the last line is a footer; everything in between, normalized, is what gets
hashed and signed. A verifier must rebuild exactly the same bytes, so the
rules here are fixed:

- lines are split on ``\\r\\n``, ``\\n`` or ``\\r``
- each interior line is stripped of surrounding whitespace, using the .NET
  definition of whitespace (``\\x1c``-``\\x1f`` are kept)
- lines that end up empty are dropped
- survivors are joined with ``\\n`` and the result is right-stripped
"""

from __future__ import annotations

from collections.abc import Sequence
import hashlib
import re

from vifsign.config.defaults import DIGEST_ALGORITHM, LINE_SEPARATOR, TRIM_CHARS, VIF_ENCODING

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text into lines the way a line-by-line file reader does.

    A single trailing line terminator does not produce an extra empty line,
    but empty lines anywhere else are kept.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def build_canonical_payload(lines: Sequence[str]) -> str:
    """Build the signed payload from every line except the first and last."""
    body = (line.strip(TRIM_CHARS) for line in lines[1:-1])
    return LINE_SEPARATOR.join(line for line in body if line).rstrip(TRIM_CHARS)


def compute_digest(payload: str) -> bytes:
    """SHA-512 digest of the payload's UTF-8 bytes."""
    return hashlib.new(DIGEST_ALGORITHM, payload.encode(VIF_ENCODING)).digest()


# 🔏📦🔚
