"""
CLI - Command-line interface for compiling PRD files into task trees.

Orchestrates:
1. Configuration and environment loading
2. PRD file reading with size and encoding checks
3. Compilation into a task tree report
4. Output as JSON to file or stdout (or a short summary)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .parser import ProcessingReport, process_file
from .core.config import AppConfig, load_config
from .utils.logger import setup_logging, get_logger, log_exception

logger = get_logger(__name__)


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="prdtree",
        description="Compile a PRD document into a hierarchical task tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prd.md -o tree.json
  %(prog)s prd.md --summary
  %(prog)s prd.md -c config.yaml --no-sections --indent 4
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Input PRD file (markdown or text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output JSON file (default: stdout)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a short summary instead of the JSON report",
    )

    parser.add_argument(
        "--no-sections",
        action="store_true",
        help="Omit the flat section list from the JSON report",
    )

    parser.add_argument(
        "--max-size",
        type=positive_int,
        help="Maximum input size in bytes (overrides config)",
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (overrides config)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def render_report(report: ProcessingReport, config: AppConfig) -> str:
    """
    Serialize a report according to output settings.

    Args:
        report: Processing report
        config: Application configuration

    Returns:
        JSON string
    """
    data = report.to_dict(include_sections=config.output.include_sections)
    indent = config.output.indent if config.output.pretty_print else None
    return json.dumps(data, indent=indent, ensure_ascii=config.output.ensure_ascii)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(level="INFO")
        logger.error(f"Could not load config: {e}")
        return 1

    if args.max_size is not None:
        config.input.max_size_bytes = args.max_size
    if args.indent is not None:
        config.output.indent = args.indent
    if args.no_sections:
        config.output.include_sections = False

    log_level = "DEBUG" if args.verbose else config.logging.level
    setup_logging(
        level=log_level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    logger.info(f"Input: {args.input}")

    try:
        report = process_file(args.input, config.input)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except OSError as e:
        log_exception(logger, "Could not read input", e)
        return 1

    logger.info(f"Compiled {report.total_tasks} tasks ({report.root_count} roots)")

    if args.summary:
        print(report.summary())
        return 0

    output = render_report(report, config)

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output, encoding="utf-8")
        except OSError as e:
            log_exception(logger, "Could not write output", e)
            return 1
        logger.info(f"Output written to: {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
