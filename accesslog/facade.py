"""Access Log Report - Facade over parser, analyzer and formatter"""

from typing import Iterable, Optional

from .patterns import DEFAULT_TOP_N
from .models import LogReport
from .parsers import LineParser, CommonLogFormatParser
from .analyzer import Analyzer, LogAnalyzer
from .output import ReportFormatter, TextReportFormatter


class HttpLogParser:
    """Wires a line parser, an analyzer and a formatter together.

    Defaults to the Common Log Format parser, the streaming analyzer and
    the plain text formatter.
    """

    def __init__(self, line_parser: Optional[LineParser] = None,
                 analyzer: Optional[Analyzer] = None,
                 formatter: Optional[ReportFormatter] = None):
        self.line_parser = line_parser or CommonLogFormatParser()
        self.analyzer = analyzer or LogAnalyzer()
        self.formatter = formatter or TextReportFormatter()

    def analyze_lines(self, lines: Iterable[str], top_n: int = DEFAULT_TOP_N) -> LogReport:
        return self.analyzer.analyze(lines, self.line_parser, top_n)

    def parse_log_file_streaming(self, filepath, top_n: int = DEFAULT_TOP_N) -> LogReport:
        return self.analyzer.analyze_file(filepath, self.line_parser, top_n)

    def parse_and_generate_report(self, filepath, top_n: int = DEFAULT_TOP_N) -> str:
        return self.formatter.format(self.parse_log_file_streaming(filepath, top_n))
