# ============================================================================
#  File:    file_collector.py
#  Purpose: Recursive, depth-first enumeration of files under a root folder
# ============================================================================
# SECTION 1: Imports
# ============================================================================
import os
from typing import Iterator, List

from loguru import logger

from extension_count.error_handling import FilesystemError

# ============================================================================
# SECTION 2: Directory Listing
# ============================================================================
def _list_dir(path: str) -> List[str]:
    """Full paths of the direct entries of ``path``, in listing order."""
    try:
        names = os.listdir(path)
    except FileNotFoundError as e:
        raise FilesystemError(path, "no such directory") from e
    except NotADirectoryError as e:
        raise FilesystemError(path, "not a directory") from e
    except PermissionError as e:
        raise FilesystemError(path, "permission denied") from e
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e
    return [os.path.join(path, name) for name in names]

# ============================================================================
# SECTION 3: Traversal
# ============================================================================
def walk(root_path: str) -> Iterator[str]:
    """
    Yield every non-directory entry beneath ``root_path``.

    Traversal is depth-first and pre-order, using an explicit stack of
    directory listings instead of recursion. Entries keep the order the
    operating system lists them in; nothing is sorted, so the order can
    differ between filesystems. Symlinks to directories are followed and
    there is no cycle detection.

    Raises:
        FilesystemError: the root (or any subdirectory) is missing,
            not a directory, or unreadable.
    """
    root_path = os.fspath(root_path)
    if not os.path.exists(root_path):
        raise FilesystemError(root_path, "no such directory")
    if not os.path.isdir(root_path):
        raise FilesystemError(root_path, "not a directory")

    stack = [iter(_list_dir(root_path))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        if os.path.isdir(entry):
            logger.trace(f"Entering {entry}")
            stack.append(iter(_list_dir(entry)))
        else:
            yield entry

def collect(root_path: str) -> List[str]:
    """
    Recursively collect every file under a directory.

    Args:
        root_path: Directory to scan

    Returns:
        Paths built as root + separator + entry name, in depth-first listing order
    """
    files = list(walk(root_path))
    logger.debug(f"Collected {len(files)} files under {root_path}")
    return files
