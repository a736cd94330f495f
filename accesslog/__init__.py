"""Access Log Report package"""

from .patterns import VERSION, DEFAULT_TOP_N, MIN_TIMESTAMP
from .models import LogEntry, LogReport, UrlCount, IpCount
from .parsers import LineParser, CommonLogFormatParser
from .analyzer import Analyzer, LogAnalyzer, read_lines
from .output import ReportFormatter, TextReportFormatter, JsonReportFormatter, print_report
from .facade import HttpLogParser

__all__ = [
    'VERSION', 'DEFAULT_TOP_N', 'MIN_TIMESTAMP',
    'LogEntry', 'LogReport', 'UrlCount', 'IpCount',
    'LineParser', 'CommonLogFormatParser',
    'Analyzer', 'LogAnalyzer', 'read_lines',
    'ReportFormatter', 'TextReportFormatter', 'JsonReportFormatter', 'print_report',
    'HttpLogParser',
]
