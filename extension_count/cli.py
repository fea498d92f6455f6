# ============================================================================
#  File:    cli.py
#  Purpose: Command line entry point for extension-count
# ============================================================================
# SECTION 1: Imports and Global Variables
# ============================================================================
import argparse
import json
import sys
from typing import List, Optional

from loguru import logger

from extension_count.config_manager import ConfigManager
from extension_count.error_handling import ConfigurationError
from extension_count.logging_setup import setup_logging
from extension_count.rendering import make_console, render_report
from extension_count.report_builder import iter_reports

__version__ = "1.0.0"

EXIT_OK = 0
EXIT_SCAN_FAILED = 1
EXIT_USAGE = 2

# ============================================================================
# SECTION 2: Argument Parsing
# ============================================================================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extension-count",
        description="Count file extensions in one or more directories.",
        epilog="Example: extension-count ./src --sort count"
    )
    parser.add_argument("folders", nargs="+", metavar="FOLDER", help="Folders to scan")
    parser.add_argument("--ci", "--plain", dest="plain", action="store_true", default=None,
                        help="Disable colours")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of tables")
    parser.add_argument("--limit", type=int, default=None, metavar="N",
                        help="Files listed per extension (0 = unlimited)")
    parser.add_argument("--sort", choices=["none", "count", "ext", "files"], default=None,
                        help="Row order (default: order of first discovery)")
    parser.add_argument("--reverse", action="store_true", default=None, help="Reverse row order")
    parser.add_argument("--keep-going", dest="keep_going", action="store_true", default=None,
                        help="Report unreadable folders and continue with the rest")
    parser.add_argument("--config", default=None, metavar="PATH",
                        help="Settings file (YAML or JSON)")
    parser.add_argument("--labels", dest="labels_path", default=None, metavar="PATH",
                        help="JSON file mapping extensions to labels")
    parser.add_argument("--log-level", dest="log_level", default=None, type=str.upper,
                        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level for stderr")
    parser.add_argument("--log-file", dest="log_file", default=None, metavar="PATH",
                        help="Also write DEBUG logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

# ============================================================================
# SECTION 3: Main Logic
# ============================================================================
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    try:
        config_manager = ConfigManager(args.config)
        settings = config_manager.override(
            plain=args.plain,
            limit=args.limit,
            sort=args.sort,
            reverse=args.reverse,
            keep_going=args.keep_going,
            labels_path=args.labels_path,
            log_level=args.log_level,
            log_file=args.log_file
        )
        labels = config_manager.load_labels(settings)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(settings.log_level, settings.log_file)
    logger.debug(f"Settings: {settings.model_dump()}")

    console = make_console(settings.plain)
    limit = settings.limit or None
    exit_code = EXIT_OK
    results = []

    for _folder, report, error in iter_reports(args.folders, labels):
        if error is not None:
            print(f"Error: {error.message}", file=sys.stderr)
            exit_code = EXIT_SCAN_FAILED
            if not settings.keep_going:
                break
            continue

        if args.json:
            results.append(report.to_dict())
        else:
            render_report(report, console, limit, settings.sort, settings.reverse)

    if args.json:
        print(json.dumps(results, indent=2))
    return exit_code

if __name__ == '__main__':
    sys.exit(main())
