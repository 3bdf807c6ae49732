#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for vifsign tests."""

from __future__ import annotations

import base64
from collections.abc import Iterator
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

SAMPLE_VIF_LINES = [
    ":",
    "KeePassPluginExample:1.2.3",
    "  KeePassPluginOther:0.9  ",
    "",
    ":",
]


def _b64(value: int) -> str:
    length = max(1, (value.bit_length() + 7) // 8)
    return base64.b64encode(value.to_bytes(length, "big")).decode("ascii")


def rsa_key_to_xml(private_key: rsa.RSAPrivateKey, include_crt: bool = True) -> str:
    """Serialize a key as .NET RSAKeyValue XML."""
    numbers = private_key.private_numbers()
    public = numbers.public_numbers
    fields = [("Modulus", public.n), ("Exponent", public.e)]
    if include_crt:
        fields += [
            ("P", numbers.p),
            ("Q", numbers.q),
            ("DP", numbers.dmp1),
            ("DQ", numbers.dmq1),
            ("InverseQ", numbers.iqmp),
        ]
    fields.append(("D", numbers.d))
    body = "".join(f"<{name}>{_b64(value)}</{name}>" for name, value in fields)
    return f"<RSAKeyValue>{body}</RSAKeyValue>"


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset Foundation logging state around every test."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """A 2048-bit RSA key shared across the session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def pem_key_file(tmp_path: Path, rsa_private_key: rsa.RSAPrivateKey) -> Path:
    key_path = tmp_path / "private.pem"
    key_path.write_bytes(
        rsa_private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return key_path


@pytest.fixture
def xml_key_file(tmp_path: Path, rsa_private_key: rsa.RSAPrivateKey) -> Path:
    key_path = tmp_path / "private.xml"
    key_path.write_text(rsa_key_to_xml(rsa_private_key), encoding="utf-8")
    return key_path


@pytest.fixture
def vif_file(tmp_path: Path) -> Path:
    """A small Version Information File with header and footer lines."""
    vif_path = tmp_path / "version.txt"
    vif_path.write_text("\n".join(SAMPLE_VIF_LINES) + "\n", encoding="utf-8")
    return vif_path


# 🔏📦🔚
