# ============================================================================
#  File:    rendering.py
#  Purpose: File list formatting and rich table output for folder reports
# ============================================================================
# SECTION 1: Imports
# ============================================================================
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from extension_count.models import FileReportRow, FolderReport

HEADER = ("Extension", "File Count", "Files")

# ============================================================================
# SECTION 2: File List
# ============================================================================
def render_file_list(files: Sequence[str], limit: Optional[int] = 10) -> str:
    """
    Newline-joined file paths, truncated to ``limit`` entries.

    When more than ``limit`` paths are given, the listing ends with an
    ``"<N> more files"`` line. ``limit=None`` (or zero and below) lists
    everything.
    """
    if limit is not None and 0 < limit < len(files):
        shown = "\n".join(files[:limit])
        return f"{shown}\n{len(files) - limit} more files"
    return "\n".join(files)

# ============================================================================
# SECTION 3: Row Ordering
# ============================================================================
def sort_rows(rows: Sequence[FileReportRow], key: str = "none", reverse: bool = False) -> List[FileReportRow]:
    """
    Rows ordered for display.

    ``none`` keeps first-discovery order, ``count`` and ``files`` put the
    largest groups first, ``ext`` is alphabetical. Ties fall back to the
    other field.
    """
    if key == "count":
        ordered = sorted(rows, key=lambda row: (-row.count, row.extension))
    elif key == "ext":
        ordered = sorted(rows, key=lambda row: (row.extension, -row.count))
    elif key == "files":
        ordered = sorted(rows, key=lambda row: (-len(row.files), row.extension))
    elif key == "none":
        ordered = list(rows)
    else:
        raise ValueError(f"unknown sort key: {key}")
    if reverse:
        ordered.reverse()
    return ordered

# ============================================================================
# SECTION 4: Console Output
# ============================================================================
def printable(text: str) -> str:
    """
    Text safe to write to a UTF-8 console.

    Names that are not valid UTF-8 come back from the OS with lone
    surrogates; those bytes are shown as U+FFFD.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")

def make_console(plain: bool = False) -> Console:
    """Stdout console; ``plain`` turns colour and highlighting off."""
    if plain:
        return Console(no_color=True, highlight=False, soft_wrap=False)
    return Console(highlight=False)

def build_table(report: FolderReport, limit: Optional[int] = None, sort: str = "none", reverse: bool = False) -> Table:
    table = Table(box=box.SQUARE, show_header=True, show_lines=True, header_style="bold")
    table.add_column(HEADER[0], style="blue", no_wrap=True)
    table.add_column(HEADER[1], style="bold blue", justify="right", no_wrap=True)
    table.add_column(HEADER[2], overflow="fold")
    for row in sort_rows(report.rows, sort, reverse):
        table.add_row(
            Text(printable(row.label or row.extension)),
            Text(str(row.count)),
            Text(printable(render_file_list(row.files, limit)))
        )
    return table

def render_report(
    report: FolderReport,
    console: Console,
    limit: Optional[int] = None,
    sort: str = "none",
    reverse: bool = False
) -> None:
    """Print one folder's title, total and extension table."""
    console.print(Text.assemble("Results for: ", (printable(report.title), "yellow")))
    console.print(Text.assemble("Total files: ", (str(report.total_files), "bold")))
    console.print()
    console.print(build_table(report, limit, sort, reverse))
    console.print()
