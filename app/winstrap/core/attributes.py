"""Hidden file attribute helpers.

On Windows a directory is hidden by its FILE_ATTRIBUTE_HIDDEN flag. On
other hosts a leading dot already hides it, so setting is a no-op.
"""

import logging
import stat
from pathlib import Path

from winstrap.core.platform import is_windows
from winstrap.utils.shell import run_command

logger = logging.getLogger(__name__)


def is_hidden(path: Path) -> bool:
    """Check if a path is hidden.

    Args:
        path: Existing file or directory.

    Returns:
        True if the hidden attribute is set (Windows) or the name starts
        with a dot (elsewhere).
    """
    if not is_windows():
        return path.name.startswith(".")
    attributes = getattr(path.stat(), "st_file_attributes", 0)
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def set_hidden(path: Path) -> None:
    """Set the hidden attribute on a path.

    Args:
        path: Existing file or directory.

    Raises:
        OSError: If attrib fails.
    """
    if not is_windows():
        return
    result = run_command(["attrib", "+h", str(path)])
    if not result.success:
        detail = result.stderr.strip() or result.stdout.strip()
        msg = f"attrib +h failed for {path}: {detail or f'exit status {result.returncode}'}"
        raise OSError(msg)
    logger.debug("Set hidden attribute on %s", path)
