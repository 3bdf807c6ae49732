#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-place signing of Version Information Files."""

from __future__ import annotations

import base64
from pathlib import Path

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from provide.foundation import logger
from provide.foundation.file import atomic_write

from vifsign.config.defaults import (
    LINE_SEPARATOR,
    MIN_SIGNABLE_LINES,
    TRIM_CHARS,
    UTF8_BOM,
    VIF_ENCODING,
)
from vifsign.exceptions import SigningError, VifPathError
from vifsign.signing.canonical import build_canonical_payload, compute_digest, split_lines
from vifsign.signing.keys import load_private_key


def sign_digest(digest: bytes, private_key: rsa.RSAPrivateKey) -> str:
    """Sign a payload digest and return the base64 signature.

    The digest itself is the signed message, hashed again with SHA-512 by the
    PKCS#1 v1.5 scheme. PKCS#1 v1.5 has no random salt, so the same digest and
    key always give the same signature.
    """
    try:
        signature = private_key.sign(digest, padding.PKCS1v15(), hashes.SHA512())
    except (ValueError, TypeError) as e:
        raise SigningError(f"RSA signing failed: {e}") from e
    return base64.b64encode(signature).decode("ascii")


def sign_vif(source_path: Path, private_key_path: Path) -> str | None:
    """Sign a Version Information File in place.

    The canonical payload of the file is hashed and signed, and the base64
    signature is appended to the end of the first line. The file is rewritten
    atomically without a trailing line terminator.

    Args:
        source_path: Path of the VIF to sign
        private_key_path: Path of the RSA private key

    Returns:
        The base64 signature, or None when the file has fewer than two lines
        and was left untouched

    Raises:
        VifPathError: If the VIF or key file is missing
        KeyFormatError: If the key cannot be parsed
        SigningError: If the VIF cannot be read or rewritten
    """
    has_bom, lines = _read_vif(source_path)

    # A bad key fails the run even when there is nothing to sign
    private_key = load_private_key(private_key_path)

    if len(lines) < MIN_SIGNABLE_LINES:
        logger.info("VIF has nothing to sign, leaving it unchanged", path=str(source_path), lines=len(lines))
        return None

    payload = build_canonical_payload(lines)
    digest = compute_digest(payload)
    logger.debug(
        "Built canonical payload",
        path=str(source_path),
        payload_bytes=len(payload.encode(VIF_ENCODING)),
        digest=digest.hex(),
    )

    signature = sign_digest(digest, private_key)
    lines[0] = lines[0] + signature

    content = LINE_SEPARATOR.join(lines).rstrip(TRIM_CHARS)
    if has_bom:
        content = UTF8_BOM + content

    try:
        atomic_write(source_path, content.encode(VIF_ENCODING))
    except OSError as e:
        raise SigningError(f"Failed to write signed VIF {source_path}: {e}") from e

    logger.info("Signed VIF", path=str(source_path), signature_length=len(signature))
    return signature


def _read_vif(source_path: Path) -> tuple[bool, list[str]]:
    """Read a VIF as UTF-8 lines, reporting whether it started with a BOM."""
    try:
        raw = source_path.read_bytes()
    except FileNotFoundError as e:
        raise VifPathError(f"VIF not found: {source_path}") from e
    except OSError as e:
        raise SigningError(f"Cannot read VIF {source_path}: {e}") from e

    try:
        text = raw.decode(VIF_ENCODING)
    except UnicodeDecodeError as e:
        raise SigningError(f"VIF {source_path} is not valid UTF-8: {e}") from e

    has_bom = text.startswith(UTF8_BOM)
    if has_bom:
        text = text[len(UTF8_BOM) :]
    return has_bom, split_lines(text)


# 🔏📦🔚
