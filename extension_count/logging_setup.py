# ============================================================================
#  File:    logging_setup.py
#  Purpose: Loguru sink configuration for the command line tool
# ============================================================================
# SECTION 1: Imports and Global Variables
# ============================================================================
import os
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

# ============================================================================
# SECTION 2: Functions
# ============================================================================
def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Route log records to stderr, and optionally to a rotating file.

    Args:
        level: Minimum level written to stderr
        log_file: Optional path of a DEBUG-level log file
    """
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level.upper())

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        logger.add(log_file, format=FILE_FORMAT, rotation="10 MB", level="DEBUG")
