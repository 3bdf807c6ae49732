#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Gzip archiving of signed Version Information Files."""

from __future__ import annotations

from pathlib import Path

from provide.foundation import logger
from provide.foundation.archive import GzipCompressor
from provide.foundation.archive.base import ArchiveError

from vifsign.config.defaults import ARCHIVE_SUFFIX
from vifsign.exceptions import ArchivingError, OutputExistsError


def archive_path_for(source_path: Path) -> Path:
    """Return ``source_path`` with the archive suffix appended to its name."""
    return source_path.with_name(source_path.name + ARCHIVE_SUFFIX)


def gzip_file(source_path: Path) -> Path:
    """Compress a file into a sibling ``.gz`` file.

    The source is streamed through the compressor and left unmodified. Only
    the decompressed content is stable; gzip headers may differ between runs.

    Args:
        source_path: Path of the file to compress

    Returns:
        Path of the compressed file

    Raises:
        OutputExistsError: If the compressed file already exists
        ArchivingError: If reading or writing fails
    """
    target_path = archive_path_for(source_path)
    if target_path.exists():
        raise OutputExistsError(f"Archive already exists: {target_path}")

    logger.debug("Compressing file", source=str(source_path), target=str(target_path))
    try:
        GzipCompressor().compress_file(source_path, target_path)
    except (ArchiveError, OSError) as e:
        raise ArchivingError(f"Failed to compress {source_path}: {e}") from e

    logger.info(
        "Compressed file",
        source=str(source_path),
        target=str(target_path),
        size=target_path.stat().st_size,
    )
    return target_path


# 🔏📦🔚
