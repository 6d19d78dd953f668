"""Finding the MP3 files below a folder."""

import logging
import os
from typing import List

from retagger.errors import ScanError

logger = logging.getLogger("retagger.scanner")

MP3_EXTENSION = ".mp3"


def scan(root: str = ".") -> List[str]:
    """
    Find all .mp3 files below root, recursively.

    The extension match is case-sensitive and hidden files and folders are
    skipped.

    Args:
        root: Folder to scan

    Returns:
        Sorted list of paths, joined with root

    Raises:
        ScanError: If root or one of its subfolders cannot be read
    """
    if not os.path.exists(root):
        raise ScanError(f"Folder does not exist: {root}")
    if not os.path.isdir(root):
        raise ScanError(f"Not a folder: {root}")

    files = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_scan_error):
        dirnames[:] = [d for d in dirnames if not _is_hidden(d)]
        for filename in filenames:
            if filename.endswith(MP3_EXTENSION) and not _is_hidden(filename):
                files.append(os.path.normpath(os.path.join(dirpath, filename)))

    files.sort()
    logger.debug(f"Found {len(files)} .mp3 file(s) below {os.path.abspath(root)}")
    return files


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _raise_scan_error(error: OSError) -> None:
    raise ScanError(f"Cannot read folder: {error.strerror or error}", error.filename) from error
