#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Per-run staging directories.

Every run works on a copy of its input inside a freshly named directory, so
the input itself is never mutated and repeated runs never collide.
"""

from __future__ import annotations

from pathlib import Path
import tempfile
import uuid

from provide.foundation import logger
from provide.foundation.file import ensure_dir, safe_copy

from vifsign.config.defaults import WORK_DIR_NAME
from vifsign.exceptions import ArchivingError, VifPathError


def default_work_root() -> Path:
    return Path(tempfile.gettempdir()) / WORK_DIR_NAME


def create_work_dir(root: Path | None = None) -> Path:
    """Create a uniquely named directory under ``root``."""
    work_root = root if root is not None else default_work_root()
    work_dir = work_root / uuid.uuid4().hex
    try:
        ensure_dir(work_dir)
    except OSError as e:
        raise ArchivingError(f"Cannot create work directory {work_dir}: {e}") from e
    logger.debug("Created work directory", work_dir=str(work_dir))
    return work_dir


def stage_file(source_path: Path, work_dir: Path) -> Path:
    """Copy ``source_path`` into ``work_dir`` under its own name."""
    staged_path = work_dir / source_path.name
    try:
        safe_copy(source_path, staged_path, preserve_mode=True, overwrite=False)
    except PermissionError as e:
        raise VifPathError(f"Cannot read {source_path}: {e}") from e
    except OSError as e:
        raise ArchivingError(f"Cannot stage {source_path} in {work_dir}: {e}") from e
    logger.debug("Staged file", source=str(source_path), staged=str(staged_path))
    return staged_path


# 🔏📦🔚
