#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""RSA private key loading.

Keys are accepted in three encodings:

- .NET ``<RSAKeyValue>`` XML, where every component is a base64 big-endian integer
- PEM (PKCS#1 or PKCS#8, unencrypted)
- DER (PKCS#1 or PKCS#8, unencrypted)
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Callable
from pathlib import Path
from typing import Any
import xml.etree.ElementTree as ET

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from provide.foundation import logger

from vifsign.exceptions import KeyFormatError, VifPathError

XML_ROOT_TAG = "RSAKeyValue"
XML_REQUIRED_FIELDS = ("Modulus", "Exponent", "D")
XML_CRT_FIELDS = ("P", "Q", "DP", "DQ", "InverseQ")


def load_private_key(key_path: Path) -> rsa.RSAPrivateKey:
    """Load an RSA private key from an XML, PEM or DER file.

    Args:
        key_path: Path to the private key file

    Returns:
        The parsed RSA private key

    Raises:
        VifPathError: If the key file does not exist or cannot be read
        KeyFormatError: If the file is not a parseable RSA private key
    """
    try:
        data = key_path.read_bytes()
    except FileNotFoundError as e:
        raise VifPathError(f"Private key file not found: {key_path}") from e
    except OSError as e:
        raise VifPathError(f"Cannot read private key file {key_path}: {e}") from e

    stripped = data.lstrip(b"\xef\xbb\xbf").strip()
    if not stripped:
        raise KeyFormatError(f"Private key file is empty: {key_path}")

    if stripped.startswith(b"<"):
        key_format = "xml"
        private_key = _load_xml_key(stripped, key_path)
    elif stripped.startswith(b"-----BEGIN"):
        key_format = "pem"
        private_key = _load_serialized_key(stripped, key_path, serialization.load_pem_private_key)
    else:
        key_format = "der"
        private_key = _load_serialized_key(data, key_path, serialization.load_der_private_key)

    logger.debug(
        "Loaded RSA private key",
        path=str(key_path),
        format=key_format,
        key_size=private_key.key_size,
    )
    return private_key


def _load_serialized_key(
    data: bytes,
    key_path: Path,
    loader: Callable[..., Any],
) -> rsa.RSAPrivateKey:
    try:
        private_key = loader(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(f"Failed to load private key from {key_path}: {e}") from e

    if not isinstance(private_key, rsa.RSAPrivateKey):
        key_type = type(private_key).__name__
        raise KeyFormatError(
            f"Incompatible key type in {key_path}: {key_type}. "
            "An RSA private key is required to sign Version Information Files."
        )
    return private_key


def _load_xml_key(data: bytes, key_path: Path) -> rsa.RSAPrivateKey:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise KeyFormatError(f"Failed to parse XML private key {key_path}: {e}") from e

    if _local_name(root.tag) != XML_ROOT_TAG:
        raise KeyFormatError(f"Expected <{XML_ROOT_TAG}> in {key_path}, found <{_local_name(root.tag)}>")

    values: dict[str, int] = {}
    for child in root:
        name = _local_name(child.tag)
        text = (child.text or "").strip()
        if not text:
            continue
        try:
            values[name] = int.from_bytes(base64.b64decode("".join(text.split()), validate=True), "big")
        except (binascii.Error, ValueError) as e:
            raise KeyFormatError(f"Invalid base64 in <{name}> of {key_path}") from e

    missing = [name for name in XML_REQUIRED_FIELDS if name not in values]
    if missing:
        raise KeyFormatError(
            f"XML key {key_path} is missing {', '.join(missing)}; a private RSA key is required"
        )

    n, e, d = values["Modulus"], values["Exponent"], values["D"]
    public_numbers = rsa.RSAPublicNumbers(e, n)

    try:
        if all(name in values for name in XML_CRT_FIELDS):
            numbers = rsa.RSAPrivateNumbers(
                p=values["P"],
                q=values["Q"],
                d=d,
                dmp1=values["DP"],
                dmq1=values["DQ"],
                iqmp=values["InverseQ"],
                public_numbers=public_numbers,
            )
        else:
            logger.debug("XML key has no CRT parameters, recovering primes", path=str(key_path))
            p, q = rsa.rsa_recover_prime_factors(n, e, d)
            numbers = rsa.RSAPrivateNumbers(
                p=p,
                q=q,
                d=d,
                dmp1=rsa.rsa_crt_dmp1(d, p),
                dmq1=rsa.rsa_crt_dmq1(d, q),
                iqmp=rsa.rsa_crt_iqmp(p, q),
                public_numbers=public_numbers,
            )
        return numbers.private_key()
    except (ValueError, TypeError) as e:
        raise KeyFormatError(f"Inconsistent RSA parameters in {key_path}: {e}") from e


def _local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


# 🔏📦🔚
