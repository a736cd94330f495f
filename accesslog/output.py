"""Access Log Report - Report output"""

import json
from abc import ABC, abstractmethod

from rich.panel import Panel
from rich.table import Table
from rich import box

from .models import LogReport

RULE_WIDTH = 50
SUB_RULE_WIDTH = 30


class ReportFormatter(ABC):
    """Turns a LogReport into text"""

    @abstractmethod
    def format(self, report: LogReport) -> str:
        ...


class TextReportFormatter(ReportFormatter):
    """Plain text report with 1-based ranks"""

    def format(self, report: LogReport) -> str:
        lines = [
            "=" * RULE_WIDTH,
            "HTTP LOG ANALYSIS REPORT",
            "=" * RULE_WIDTH,
            "",
            f"Number of Unique IP Addresses: {report.unique_ip_count}",
            "",
            f"Top {len(report.top_urls)} Most Visited URLs:",
            "-" * SUB_RULE_WIDTH,
        ]
        for rank, item in enumerate(report.top_urls, 1):
            lines.append(f"  {rank}. {item.url} ({item.count} visits)")
        lines.append("")

        lines.append(f"Top {len(report.top_ip_addresses)} Most Active IP Addresses:")
        lines.append("-" * SUB_RULE_WIDTH)
        for rank, item in enumerate(report.top_ip_addresses, 1):
            lines.append(f"  {rank}. {item.ip_address} ({item.count} requests)")
        lines.append("")
        lines.append("=" * RULE_WIDTH)

        return "\n".join(lines) + "\n"


class JsonReportFormatter(ReportFormatter):

    def format(self, report: LogReport) -> str:
        return json.dumps(report.to_dict(), indent=2)


def print_report(report: LogReport, console):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              HTTP LOG ANALYSIS REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    console.print(Panel.fit(
        f"Unique IPs: [cyan]{report.unique_ip_count:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    # Top URLs
    console.print("\n" + "─" * 70, style="cyan")
    console.print(f"TOP {len(report.top_urls)} URLs (by visits)", style="bold")
    table = Table(box=box.ROUNDED)
    table.add_column("#", style="dim")
    table.add_column("URL", style="cyan")
    table.add_column("Visits", style="white")
    for rank, item in enumerate(report.top_urls, 1):
        table.add_row(str(rank), item.url, str(item.count))
    console.print(table)

    # Top IPs
    console.print("\n" + "─" * 70, style="cyan")
    console.print(f"TOP {len(report.top_ip_addresses)} IPs (by requests)", style="bold")
    table = Table(box=box.ROUNDED)
    table.add_column("#", style="dim")
    table.add_column("IP Address", style="cyan")
    table.add_column("Requests", style="white")
    for rank, item in enumerate(report.top_ip_addresses, 1):
        table.add_row(str(rank), item.ip_address, str(item.count))
    console.print(table)

    console.print("\n" + "═" * 70, style="cyan")
