#!/usr/bin/env python3
"""Access Log Report - Entry point"""

from accesslog.cli import main


if __name__ == "__main__":
    main()
