"""Access Log Report - Command line interface"""

import argparse
import json
import logging

from rich.console import Console
from rich.logging import RichHandler

from . import (
    VERSION, DEFAULT_TOP_N, HttpLogParser, JsonReportFormatter, LogAnalyzer, print_report
)

logger = logging.getLogger("accesslog")


def setup_logging(debug: bool = False):
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if debug else logging.INFO,
        handlers=[
            RichHandler(console=Console(stderr=True), rich_tracebacks=True,
                        log_time_format="%Y-%m-%d %H:%M:%S")
        ],
    )


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Access Log Report - HTTP access log summary",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", help="Access log file (Common/Combined Log Format)")
    parser.add_argument("-n", "--top", type=non_negative_int, default=DEFAULT_TOP_N,
                        help="Number of URLs and IPs to rank")
    parser.add_argument("-f", "--format", choices=['text', 'rich', 'json'],
                        default='text', help="Report format")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"AccessLogReport v{VERSION}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not args.logfile:
        print("Usage: access-log-report <logfile>")
        print("Example: access-log-report access.log")
        return

    setup_logging(args.debug)

    console = Console()
    analyzer = LogAnalyzer(console=console if args.format == 'rich' else None)
    http_log_parser = HttpLogParser(analyzer=analyzer)

    try:
        report = http_log_parser.parse_log_file_streaming(args.logfile, args.top)
    except FileNotFoundError:
        print(f"Error: File '{args.logfile}' not found.")
        return

    if args.format == 'json':
        print(JsonReportFormatter().format(report))
    elif args.format == 'rich':
        print_report(report, console)
    else:
        print(http_log_parser.formatter.format(report), end="")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report.to_dict(), f, indent=2)
        logger.info("Report saved to: %s", args.output)
