"""Allow running as ``python -m saferenv``."""

import sys

from saferenv.cli.cli import main

sys.exit(main())
