#!/usr/bin/env python3
"""Main entry point for sleepprogress package."""

import sys
from sleepprogress.cli import main

if __name__ == "__main__":
    sys.exit(main())
