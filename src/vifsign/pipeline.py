#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for preparing a Version Information File for distribution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file import safe_copy

from vifsign.archive import archive_path_for, gzip_file
from vifsign.exceptions import ArchivingError, OutputExistsError, VifPathError
from vifsign.signing import sign_vif
from vifsign.workspace import create_work_dir, stage_file

ProgressCallback = Callable[[str], None]


@frozen
class PreparedVif:
    """Outcome of a successful run."""

    output_path: Path
    signed_path: Path
    work_dir: Path
    signature: str | None


def validate_paths(vif_path: Path, private_key_path: Path) -> None:
    """Ensure both inputs exist and are regular files."""
    problems = [
        f"{label} '{path}' does not exist or is not a file"
        for label, path in (("VIF", vif_path), ("Private key", private_key_path))
        if not path.is_file()
    ]
    if problems:
        raise VifPathError("; ".join(problems))


def output_path_for(vif_path: Path) -> Path:
    """Destination of the compressed artifact, next to the input VIF."""
    return archive_path_for(vif_path)


def prepare_vif(
    vif_path: Path,
    private_key_path: Path,
    work_root: Path | None = None,
    progress: ProgressCallback | None = None,
) -> PreparedVif:
    """Sign and gzip a Version Information File.

    The input is copied into a fresh work directory, signed there, compressed,
    and the ``.gz`` result is copied next to the original input. The input VIF
    itself is never modified, and an existing artifact is never overwritten.

    Args:
        vif_path: Path to the VIF to sign
        private_key_path: Path to the RSA private key
        work_root: Root for the per-run work directory (default: system temp)
        progress: Called with a short status message after each milestone

    Returns:
        PreparedVif describing the produced artifact

    Raises:
        VifPathError: If an input path is invalid
        OutputExistsError: If the artifact already exists next to the input
        SigningError: If the key or VIF cannot be processed
        ArchivingError: If compressing or copying fails

    Example:
        ```python
        from pathlib import Path
        from vifsign import prepare_vif

        result = prepare_vif(Path("version.txt"), Path("private.xml"))
        print(result.output_path)  # version.txt.gz
        ```
    """
    report = progress or (lambda message: None)
    vif_path = vif_path.absolute()
    private_key_path = private_key_path.absolute()

    validate_paths(vif_path, private_key_path)
    output_path = output_path_for(vif_path)
    _ensure_free(output_path)
    report("Everything is okay.")

    work_dir = create_work_dir(work_root)
    staged_path = stage_file(vif_path, work_dir)
    logger.info("Staged VIF", vif=str(vif_path), work_dir=str(work_dir))

    signature = sign_vif(staged_path, private_key_path)
    report("Signed the VIF." if signature is not None else "VIF has fewer than two lines; left unsigned.")

    archive_path = gzip_file(staged_path)
    report("GZipped the signed VIF.")

    # Another process may have produced the artifact while we worked
    _ensure_free(output_path)
    try:
        safe_copy(archive_path, output_path, overwrite=False)
    except FileExistsError as e:
        raise OutputExistsError(_exists_message(output_path)) from e
    except OSError as e:
        raise ArchivingError(f"Failed to copy {archive_path} to {output_path}: {e}") from e

    logger.info("Prepared VIF", output=str(output_path), signed=signature is not None)
    return PreparedVif(
        output_path=output_path,
        signed_path=staged_path,
        work_dir=work_dir,
        signature=signature,
    )


def _ensure_free(output_path: Path) -> None:
    if output_path.exists():
        raise OutputExistsError(_exists_message(output_path))


def _exists_message(output_path: Path) -> str:
    return f"The file '{output_path}' already exists. Please move or remove it, then try again."


# 🔏📦🔚
