# ============================================================================
#  File:    report_builder.py
#  Purpose: Compose collection and grouping into per-folder reports
# ============================================================================
# SECTION 1: Imports
# ============================================================================
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple

from loguru import logger

from extension_count.error_handling import FilesystemError
from extension_count.extension_grouper import group, to_rows
from extension_count.file_collector import collect
from extension_count.models import FolderReport

# ============================================================================
# SECTION 2: Builders
# ============================================================================
def build_report(folder: str, labels: Optional[Mapping[str, str]] = None) -> FolderReport:
    """
    Scan one folder and group its files by extension.

    The folder string is used unmodified as the report title.

    Raises:
        FilesystemError: the folder cannot be scanned
    """
    files = collect(folder)
    report = FolderReport(title=folder, rows=to_rows(group(files), labels))
    logger.info(f"Built report for {folder}: {report.total_files} files, {len(report.rows)} extensions")
    return report

def build_reports(folders: Iterable[str], labels: Optional[Mapping[str, str]] = None) -> List[FolderReport]:
    """
    One report per folder, in the order given.

    Folders are neither sorted nor deduplicated. The first folder that
    cannot be scanned aborts the batch with its FilesystemError.
    """
    return [build_report(folder, labels) for folder in folders]

def iter_reports(
    folders: Iterable[str], labels: Optional[Mapping[str, str]] = None
) -> Iterator[Tuple[str, Optional[FolderReport], Optional[FilesystemError]]]:
    """
    Yield ``(folder, report, error)`` for each folder, in the order given.

    A folder that fails yields ``(folder, None, error)`` and the remaining
    folders are still scanned. The caller decides whether to stop.
    """
    for folder in folders:
        try:
            yield folder, build_report(folder, labels), None
        except FilesystemError as e:
            logger.debug(f"Could not scan {folder}: {e.reason}")
            yield folder, None, e
