# ============================================================================
#  File:    extension_grouper.py
#  Purpose: Partition file paths by extension key into report rows
# ============================================================================
# SECTION 1: Imports and Globals
# ============================================================================
import os
import re
from typing import Dict, Iterable, List, Mapping, Optional

from loguru import logger

from extension_count.models import FileReportRow

# Last dot followed by at least one non-dot character, up to the end.
EXTENSION_PATTERN = re.compile(r"(?:\.([^.]+))?\Z")

# ============================================================================
# SECTION 2: Extension Derivation
# ============================================================================
def extension_of(path: str) -> str:
    """
    Extension key of a file, leading dot included.

    Only the base name is considered: ``"a/b.tar.gz"`` gives ``".gz"``,
    ``"README"`` gives ``""`` and a dotfile such as ``".gitignore"`` gives
    ``".gitignore"``. A trailing dot (``"notes."``) gives ``""``.
    """
    name = os.path.basename(path)
    match = EXTENSION_PATTERN.search(name)
    return match.group(0) if match else ""

def label_for_extension(labels: Mapping[str, str], extension: str) -> Optional[str]:
    """Human label for an extension key, looked up without the dot and case-insensitively."""
    if not extension:
        return None
    key = extension.lstrip('.').lower()
    return labels.get(key)

# ============================================================================
# SECTION 3: Grouping
# ============================================================================
def group(files: Iterable[str]) -> Dict[str, Dict[str, None]]:
    """
    Group paths by extension key.

    Keys keep first-seen order and each value is an insertion-ordered set
    (a dict with ``None`` values), so a path seen twice is kept once.
    """
    groups: Dict[str, Dict[str, None]] = {}
    for file in files:
        groups.setdefault(extension_of(file), {})[file] = None
    logger.debug(f"Grouped files into {len(groups)} extensions")
    return groups

def to_rows(groups: Mapping[str, Mapping[str, None]], labels: Optional[Mapping[str, str]] = None) -> List[FileReportRow]:
    """Project grouped paths into rows, preserving group order."""
    labels = labels or {}
    return [
        FileReportRow(
            extension=extension,
            count=len(members),
            files=list(members),
            label=label_for_extension(labels, extension)
        )
        for extension, members in groups.items()
    ]
