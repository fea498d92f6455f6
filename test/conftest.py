# ============================================================================
# FILENAME: conftest.py
# PURPOSE: Shared fixtures and logging configuration for the test suite
# ============================================================================
# SECTION 1: Imports & Path Configuration
# ============================================================================
#
import sys
from pathlib import Path
from typing import Dict, Generator

import pytest
from loguru import logger

# Add project root to sys.path to allow for absolute imports
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))
#
# ============================================================================
# SECTION 2: Logging Configuration
# ============================================================================
#
def _default_sinks() -> None:
    logger.remove()
    logger.add(sink=sys.stderr, level="WARNING")

_default_sinks()

@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """The CLI reconfigures loguru; put the test sinks back afterwards."""
    yield
    _default_sinks()
#
# ============================================================================
# SECTION 3: Filesystem Fixtures
# ============================================================================
# Method 3.1: write_tree
# ============================================================================
#
def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) beneath ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root

@pytest.fixture
def make_tree():
    return write_tree

@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    A small project:

        proj/main.py, proj/util.py, proj/README, proj/.gitignore,
        proj/docs/guide.md, proj/docs/archive.tar.gz, proj/pkg/sub/deep.py
    """
    root = tmp_path / "proj"
    root.mkdir()
    return write_tree(root, {
        "main.py": "print('hi')\n",
        "util.py": "",
        "README": "readme\n",
        ".gitignore": "*.pyc\n",
        "docs/guide.md": "# guide\n",
        "docs/archive.tar.gz": "",
        "pkg/sub/deep.py": "",
    })
    #
    #
    ## END sample_tree fixture
