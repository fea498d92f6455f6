# ============================================================================
#  File:    __main__.py
#  Purpose: Allows ``python -m extension_count``
# ============================================================================
import sys

from extension_count.cli import main

sys.exit(main())
