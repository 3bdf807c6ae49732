#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test pipeline.py - the full sign-and-gzip flow."""

from __future__ import annotations

import base64
import gzip
import hashlib
from pathlib import Path
from unittest.mock import patch

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
import pytest

from vifsign.exceptions import ArchivingError, KeyFormatError, OutputExistsError, VifPathError
from vifsign.pipeline import output_path_for, prepare_vif, validate_paths


@pytest.mark.unit
class TestValidatePaths:
    """Test input path validation."""

    def test_valid_paths(self, vif_file: Path, pem_key_file: Path) -> None:
        validate_paths(vif_file, pem_key_file)

    def test_missing_vif(self, tmp_path: Path, pem_key_file: Path) -> None:
        with pytest.raises(VifPathError, match="VIF"):
            validate_paths(tmp_path / "missing.txt", pem_key_file)

    def test_missing_key(self, vif_file: Path, tmp_path: Path) -> None:
        with pytest.raises(VifPathError, match="Private key"):
            validate_paths(vif_file, tmp_path / "missing.key")

    def test_both_missing_reported_together(self, tmp_path: Path) -> None:
        with pytest.raises(VifPathError) as exc_info:
            validate_paths(tmp_path / "a.txt", tmp_path / "b.key")

        message = str(exc_info.value)
        assert "a.txt" in message
        assert "b.key" in message

    def test_directory_rejected(self, tmp_path: Path, pem_key_file: Path) -> None:
        with pytest.raises(VifPathError):
            validate_paths(tmp_path, pem_key_file)


@pytest.mark.integration
class TestPrepareVif:
    """Test the full pipeline."""

    def test_produces_signed_gzip_next_to_input(
        self,
        vif_file: Path,
        xml_key_file: Path,
        tmp_path: Path,
        rsa_private_key: rsa.RSAPrivateKey,
    ) -> None:
        original = vif_file.read_bytes()

        result = prepare_vif(vif_file, xml_key_file, work_root=tmp_path / "work")

        assert result.output_path == output_path_for(vif_file) == vif_file.with_name("version.txt.gz")
        assert result.output_path.exists()
        assert vif_file.read_bytes() == original

        signed = gzip.decompress(result.output_path.read_bytes())
        assert signed == result.signed_path.read_bytes()

        first_line = signed.decode("utf-8").split("\n")[0]
        assert result.signature is not None
        assert first_line == ":" + result.signature

        digest = hashlib.sha512(b"KeePassPluginExample:1.2.3\nKeePassPluginOther:0.9").digest()
        rsa_private_key.public_key().verify(
            base64.b64decode(result.signature), digest, padding.PKCS1v15(), hashes.SHA512()
        )

    def test_work_dir_is_unique_and_kept(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        work_root = tmp_path / "work"

        result = prepare_vif(vif_file, pem_key_file, work_root=work_root)

        assert result.work_dir.parent == work_root
        assert result.signed_path == result.work_dir / vif_file.name
        assert (result.work_dir / "version.txt.gz").exists()

    def test_progress_milestones(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        messages: list[str] = []

        prepare_vif(vif_file, pem_key_file, work_root=tmp_path / "work", progress=messages.append)

        assert messages == ["Everything is okay.", "Signed the VIF.", "GZipped the signed VIF."]

    def test_second_run_collides(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        first = prepare_vif(vif_file, pem_key_file, work_root=tmp_path / "work")
        artifact = first.output_path.read_bytes()

        with pytest.raises(OutputExistsError, match="already exists"):
            prepare_vif(vif_file, pem_key_file, work_root=tmp_path / "work")

        assert first.output_path.read_bytes() == artifact

    def test_collision_checked_before_staging(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        output_path_for(vif_file).write_bytes(b"existing")
        work_root = tmp_path / "work"

        with pytest.raises(OutputExistsError):
            prepare_vif(vif_file, pem_key_file, work_root=work_root)

        assert not work_root.exists()
        assert output_path_for(vif_file).read_bytes() == b"existing"

    def test_collision_appearing_mid_run(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        from vifsign import pipeline

        real_gzip = pipeline.gzip_file

        def gzip_and_race(path: Path) -> Path:
            archive = real_gzip(path)
            output_path_for(vif_file).write_bytes(b"racer")
            return archive

        with (
            patch("vifsign.pipeline.gzip_file", side_effect=gzip_and_race),
            pytest.raises(OutputExistsError),
        ):
            prepare_vif(vif_file, pem_key_file, work_root=tmp_path / "work")

        assert output_path_for(vif_file).read_bytes() == b"racer"

    def test_short_vif_is_archived_unsigned(self, tmp_path: Path, pem_key_file: Path) -> None:
        vif_path = tmp_path / "short.txt"
        vif_path.write_bytes(b"just one line\n")
        messages: list[str] = []

        result = prepare_vif(vif_path, pem_key_file, work_root=tmp_path / "work", progress=messages.append)

        assert result.signature is None
        assert gzip.decompress(result.output_path.read_bytes()) == b"just one line\n"
        assert "left unsigned" in messages[1]

    def test_malformed_key_aborts_before_archive(self, vif_file: Path, tmp_path: Path) -> None:
        bad_key = tmp_path / "bad.xml"
        bad_key.write_text("<RSAKeyValue><Modulus>AQAB</Modulus></RSAKeyValue>", encoding="utf-8")

        with pytest.raises(KeyFormatError):
            prepare_vif(vif_file, bad_key, work_root=tmp_path / "work")

        assert not output_path_for(vif_file).exists()

    def test_invalid_paths(self, tmp_path: Path, pem_key_file: Path) -> None:
        with pytest.raises(VifPathError):
            prepare_vif(tmp_path / "missing.txt", pem_key_file, work_root=tmp_path / "work")

    def test_copy_failure(self, vif_file: Path, pem_key_file: Path, tmp_path: Path) -> None:
        with (
            patch("vifsign.pipeline.safe_copy", side_effect=PermissionError("read-only")),
            pytest.raises(ArchivingError, match="read-only"),
        ):
            prepare_vif(vif_file, pem_key_file, work_root=tmp_path / "work")

    def test_relative_paths(
        self, vif_file: Path, pem_key_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = prepare_vif(Path(vif_file.name), Path(pem_key_file.name), work_root=tmp_path / "work")

        assert result.output_path == tmp_path / "version.txt.gz"


# 🔏📦🔚
