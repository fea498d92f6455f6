# ============================================================================
#  File:    models.py
#  Purpose: Pydantic models for extension reports
# ============================================================================
# SECTION 1: Imports
# ============================================================================
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

# ============================================================================
# SECTION 2: Report Models
# ============================================================================
# Class 2.1: FileReportRow
# Purpose:   One extension group within a folder
# ============================================================================
class FileReportRow(BaseModel):
    """
    Files sharing one extension key.

    ``files`` keeps discovery order and holds no duplicates, so ``count``
    always equals ``len(files)``.
    """
    model_config = ConfigDict(frozen=True)

    extension: str
    count: int
    files: List[str]
    label: Optional[str] = None

    @model_validator(mode="after")
    def check_count(self):
        if self.count != len(self.files):
            raise ValueError(f"count {self.count} does not match {len(self.files)} files")
        if len(set(self.files)) != len(self.files):
            raise ValueError("files must be unique within a row")
        return self
# End class

# ============================================================================
# Class 2.2: FolderReport
# Purpose:   Rows for one requested root folder
# ============================================================================
class FolderReport(BaseModel):
    """Extension rows for one root folder, in first-discovery order."""
    model_config = ConfigDict(frozen=True)

    title: str
    rows: List[FileReportRow]

    @model_validator(mode="after")
    def check_unique_extensions(self):
        extensions = [row.extension for row in self.rows]
        if len(set(extensions)) != len(extensions):
            raise ValueError("duplicate extension rows")
        return self

    @property
    def total_files(self) -> int:
        return sum(row.count for row in self.rows)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary, ready for json.dump."""
        data = self.model_dump()
        data['total_files'] = self.total_files
        return data
# End class
