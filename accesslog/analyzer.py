"""Access Log Report - Core analysis engine"""

import heapq
import logging
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from rich.progress import Progress, SpinnerColumn, TextColumn

from .patterns import DEFAULT_TOP_N
from .models import IpCount, LogReport, UrlCount
from .parsers import LineParser

logger = logging.getLogger(__name__)


def read_lines(filepath) -> Iterator[str]:
    """Yield the lines of a file one at a time, without their line endings."""
    with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            yield line.rstrip('\r\n')


def require_file(filepath) -> Path:
    """Return ``filepath`` as a Path, or raise FileNotFoundError unless it is a regular file."""
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {filepath}")
    return path


def rank(counts: Counter, top_n: int) -> List[Tuple[str, int]]:
    """Top ``top_n`` items by count descending, ties broken by ascending key.

    ``Counter.most_common`` orders ties by insertion, so it is not used here.
    """
    return heapq.nsmallest(top_n, counts.items(), key=lambda item: (-item[1], item[0]))


class Analyzer(ABC):
    """Aggregates parsed log lines into a LogReport"""

    @abstractmethod
    def analyze(self, lines: Iterable[str], parser: LineParser,
                top_n: int = DEFAULT_TOP_N) -> LogReport:
        ...

    def analyze_file(self, filepath, parser: LineParser,
                     top_n: int = DEFAULT_TOP_N) -> LogReport:
        return self.analyze(read_lines(require_file(filepath)), parser, top_n)


class LogAnalyzer(Analyzer):
    """Single-pass analyzer.

    Memory use is proportional to the number of distinct IPs and URLs, never
    to the number of lines. No state is kept between calls.
    """

    def __init__(self, console=None):
        self.console = console

    def analyze(self, lines: Iterable[str], parser: LineParser,
                top_n: int = DEFAULT_TOP_N) -> LogReport:
        if top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {top_n}")

        ip_stats: Counter = Counter()
        url_stats: Counter = Counter()
        total_lines = 0

        for line in lines:
            total_lines += 1
            entry = parser.parse(line)
            if entry is None:
                continue
            ip_stats[entry.ip_address] += 1
            url_stats[entry.url] += 1

        parsed = sum(ip_stats.values())
        logger.debug("Read %d lines: %d parsed, %d skipped",
                     total_lines, parsed, total_lines - parsed)

        return LogReport(
            unique_ip_count=len(ip_stats),
            top_urls=tuple(UrlCount(url, count) for url, count in rank(url_stats, top_n)),
            top_ip_addresses=tuple(IpCount(ip, count) for ip, count in rank(ip_stats, top_n)),
        )

    def analyze_file(self, filepath, parser: LineParser,
                     top_n: int = DEFAULT_TOP_N) -> LogReport:
        if self.console is None:
            return super().analyze_file(filepath, parser, top_n)

        path = require_file(filepath)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed:,} lines"),
            console=self.console,
            transient=True
        ) as progress:
            task = progress.add_task("Analyzing logs...", total=None)

            def tracked() -> Iterator[str]:
                for line in read_lines(path):
                    progress.update(task, advance=1)
                    yield line

            return self.analyze(tracked(), parser, top_n)
