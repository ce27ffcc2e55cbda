#!/usr/bin/env python3
"""saferenv CLI entry point."""

import sys
from pathlib import Path

# Ensure local source takes precedence over installed package
sys.path.insert(0, str(Path(__file__).parent))

from saferenv.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
