"""Package action - Compress the generated site into a zip archive."""

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path

from ..errors import ExternalToolError

logger = logging.getLogger(__name__)


@dataclass
class PackageResult:
    """Result of a package operation."""

    archive_path: Path
    files_packed: int = 0
    bytes_packed: int = 0

    @property
    def archive_size(self) -> int:
        """Size of the written archive in bytes."""
        return self.archive_path.stat().st_size if self.archive_path.exists() else 0


def create_archive(source_dir: Path, archive_path: Path) -> PackageResult:
    """
    Zip every file under source_dir into archive_path.

    Entries are stored relative to source_dir, in sorted order.

    Raises:
        ExternalToolError: source_dir is missing or not a directory
    """
    if not source_dir.is_dir():
        raise ExternalToolError("zip", f"output directory not found: {source_dir}")

    archive_path.parent.mkdir(parents=True, exist_ok=True)
    files = sorted(p for p in source_dir.rglob("*") if p.is_file() and p != archive_path)

    bytes_total = 0
    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for file in files:
            zf.write(file, arcname=file.relative_to(source_dir).as_posix())
            bytes_total += file.stat().st_size

    logger.info("Packed %d files (%d bytes) into %s", len(files), bytes_total, archive_path)
    return PackageResult(archive_path=archive_path, files_packed=len(files), bytes_packed=bytes_total)

