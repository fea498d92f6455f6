# ============================================================================
#  File: test_report_builder.py
#  Purpose: Tests for building folder reports
# ============================================================================
# SECTION 1: Imports
# ============================================================================
#
import os
from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from extension_count.error_handling import FilesystemError
from extension_count.file_collector import collect
from extension_count.models import FileReportRow, FolderReport
from extension_count.report_builder import build_report, build_reports, iter_reports
#
# ============================================================================
# SECTION 2: Tests
# ============================================================================
#
def test_report_title_is_unmodified(sample_tree: Path) -> None:
    folder = str(sample_tree) + os.sep

    report = build_report(folder)

    assert report.title == folder

def test_report_partitions_all_files(sample_tree: Path) -> None:
    report = build_report(str(sample_tree))
    listed = [f for row in report.rows for f in row.files]

    assert sorted(listed) == sorted(collect(str(sample_tree)))
    assert len(listed) == len(set(listed))
    assert report.total_files == 7

def test_report_extensions(sample_tree: Path) -> None:
    report = build_report(str(sample_tree))
    counts = {row.extension: row.count for row in report.rows}

    assert counts == {".py": 3, "": 1, ".gitignore": 1, ".md": 1, ".gz": 1}

def test_rows_follow_first_discovery_order(sample_tree: Path) -> None:
    files = collect(str(sample_tree))
    first_seen = []
    for f in files:
        name = os.path.basename(f)
        ext = name[name.rfind('.'):] if '.' in name else ""
        if ext not in first_seen:
            first_seen.append(ext)

    report = build_report(str(sample_tree))

    assert [row.extension for row in report.rows] == first_seen

def test_empty_folder(tmp_path: Path) -> None:
    report = build_report(str(tmp_path))

    assert report.rows == []
    assert report.total_files == 0

def test_same_folder_twice_is_stable(sample_tree: Path) -> None:
    # Listing order of an unchanged directory is assumed stable within a run
    first, second = build_reports([str(sample_tree), str(sample_tree)])

    assert first.rows == second.rows
    assert first is not second

def test_reports_keep_input_order(tmp_path: Path, make_tree) -> None:
    make_tree(tmp_path, {"a/one.txt": "", "b/1.py": "", "b/2.py": "", "b/3.py": ""})
    a, b = str(tmp_path / "a"), str(tmp_path / "b")

    assert [r.title for r in build_reports([b, a])] == [b, a]
    assert [r.title for r in build_reports([a, b])] == [a, b]

def test_labels_are_applied(sample_tree: Path) -> None:
    report = build_report(str(sample_tree), {"py": "Python"})
    labels = {row.extension: row.label for row in report.rows}

    assert labels[".py"] == "Python"
    assert labels[".md"] is None

def test_build_reports_fails_fast(sample_tree: Path, tmp_path: Path) -> None:
    missing = str(tmp_path / "missing")

    with pytest.raises(FilesystemError) as exc_info:
        build_reports([str(sample_tree), missing])

    assert exc_info.value.path == missing

def test_iter_reports_continues_after_failure(sample_tree: Path, tmp_path: Path) -> None:
    missing = str(tmp_path / "missing")

    results = list(iter_reports([missing, str(sample_tree)]))

    assert results[0][0] == missing
    assert results[0][1] is None
    assert isinstance(results[0][2], FilesystemError)
    assert results[1][1].total_files == 7
    assert results[1][2] is None

def test_iter_reports_logs_failure(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing")
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    try:
        list(iter_reports([missing]))
    finally:
        logger.remove(sink_id)

    assert any(m.startswith("DEBUG Could not scan " + missing + ": no such directory") for m in messages)

def test_to_dict_includes_total(sample_tree: Path) -> None:
    data = build_report(str(sample_tree)).to_dict()

    assert data["title"] == str(sample_tree)
    assert data["total_files"] == 7
    assert set(data["rows"][0]) == {"extension", "count", "files", "label"}
#
# ============================================================================
# SECTION 3: Model Invariants
# ============================================================================
#
def test_row_count_must_match_files() -> None:
    with pytest.raises(ValidationError):
        FileReportRow(extension=".py", count=2, files=["a.py"])

def test_row_files_must_be_unique() -> None:
    with pytest.raises(ValidationError):
        FileReportRow(extension=".py", count=2, files=["a.py", "a.py"])

def test_report_rejects_duplicate_extensions() -> None:
    row = FileReportRow(extension=".py", count=1, files=["a.py"])
    with pytest.raises(ValidationError):
        FolderReport(title="x", rows=[row, row])

def test_report_is_immutable() -> None:
    report = FolderReport(title="x", rows=[])
    with pytest.raises(ValidationError):
        report.title = "y"
#
#
## End of test_report_builder.py
