"""Clean action - Empty the generated output directory."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class CleanResult:
    """Result of a clean operation."""

    output_dir: Path
    entries_removed: int = 0
    created: bool = False


def clean_output(output_dir: Path) -> CleanResult:
    """
    Delete everything inside output_dir, creating it if absent.

    Idempotent: cleaning an empty or missing directory leaves it empty.

    Args:
        output_dir: Directory holding generated site output

    Returns:
        CleanResult with the number of top-level entries removed
    """
    if not output_dir.exists():
        output_dir.mkdir(parents=True)
        logger.debug("Created output directory %s", output_dir)
        return CleanResult(output_dir=output_dir, created=True)

    removed = 0
    for entry in output_dir.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        removed += 1

    logger.debug("Removed %d entries from %s", removed, output_dir)
    return CleanResult(output_dir=output_dir, entries_removed=removed)
