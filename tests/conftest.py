import pytest

from accesslog import CommonLogFormatParser, LogAnalyzer


def make_line(ip, url, method="GET", status="200", size="100",
              timestamp="10/Jul/2018:22:21:28 +0200"):
    return f'{ip} - - [{timestamp}] "{method} {url} HTTP/1.1" {status} {size}'


@pytest.fixture
def parser():
    return CommonLogFormatParser()


@pytest.fixture
def analyzer():
    return LogAnalyzer()
