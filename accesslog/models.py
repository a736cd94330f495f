"""Access Log Report - Data models"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Tuple


@dataclass(frozen=True)
class LogEntry:
    """Parsed access log line"""
    ip_address: str
    http_method: str
    url: str
    timestamp: datetime
    status_code: int
    response_size: int


@dataclass(frozen=True)
class UrlCount:
    url: str
    count: int


@dataclass(frozen=True)
class IpCount:
    ip_address: str
    count: int


@dataclass(frozen=True)
class LogReport:
    """Aggregated statistics for one analysis run.

    Both rankings are ordered by count descending, then by key ascending.
    """
    unique_ip_count: int
    top_urls: Tuple[UrlCount, ...] = ()
    top_ip_addresses: Tuple[IpCount, ...] = ()

    def to_dict(self) -> Dict:
        return {
            'unique_ip_count': self.unique_ip_count,
            'top_urls': [asdict(u) for u in self.top_urls],
            'top_ip_addresses': [asdict(i) for i in self.top_ip_addresses],
        }
