"""Access Log Report - Line parsers"""

import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .patterns import (
    COMMON_LOG_PATTERN, INTEGER_PATTERN, MIN_TIMESTAMP, TIMESTAMP_FORMAT, TIMESTAMP_PATTERN
)
from .models import LogEntry

logger = logging.getLogger(__name__)


class LineParser(ABC):
    """Turns one raw log line into a LogEntry.

    Implement this to support another log format; the analyzer only
    depends on ``parse``.
    """

    @abstractmethod
    def parse(self, line: str) -> Optional[LogEntry]:
        """Return the parsed entry, or None when the line should be skipped."""


_INTEGER = re.compile(INTEGER_PATTERN, re.ASCII)
_TIMESTAMP = re.compile(TIMESTAMP_PATTERN, re.ASCII)


def _to_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        return 0
    return int(value)


def _to_timestamp(value: str) -> datetime:
    if not _TIMESTAMP.fullmatch(value):
        return MIN_TIMESTAMP
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return MIN_TIMESTAMP


class CommonLogFormatParser(LineParser):
    """Parser for the Common/Combined Log Format used by Apache and Nginx"""

    def __init__(self):
        self.pattern = re.compile(COMMON_LOG_PATTERN)

    def parse(self, line: str) -> Optional[LogEntry]:
        if not line or line.isspace():
            return None

        match = self.pattern.match(line)
        if not match:
            logger.debug("Skipping unrecognized line: %.80r", line)
            return None

        groups = match.groupdict()
        return LogEntry(
            ip_address=groups['ip'],
            http_method=groups['method'],
            url=groups['url'],
            timestamp=_to_timestamp(groups['timestamp']),
            status_code=_to_int(groups['status']),
            response_size=_to_int(groups['size']),
        )
