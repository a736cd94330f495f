"""Access Log Report - Constants and patterns"""

from datetime import datetime, timezone

VERSION = "1.0.0"

DEFAULT_TOP_N = 3

# Common Log Format; Combined Log Format adds referrer and user agent after the size
# Example: 177.71.128.21 - - [10/Jul/2018:22:21:28 +0200] "GET /intranet-analytics/ HTTP/1.1" 200 3574
COMMON_LOG_PATTERN = (
    r'^(?P<ip>\S+)\s+'                                 # IP address
    r'\S+\s+'                                          # identity
    r'\S+\s+'                                          # user
    r'\[(?P<timestamp>[^\]]+)\]\s+'
    r'"(?P<method>\S+)\s+(?P<url>\S+)\s+\S+"\s+'       # method, URL, protocol
    r'(?P<status>\d+)\s+'
    r'(?P<size>\S+)'
)

# 10/Jul/2018:22:21:28 +0200
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"

# strptime alone accepts single-digit fields, so the shape is checked first
TIMESTAMP_PATTERN = r'\d{2}/[A-Za-z]{3}/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4}'

INTEGER_PATTERN = r'[+-]?\d+'

# Stands in for timestamps that fail to parse
MIN_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)
