"""Allow running as ``python -m colorfmt``."""

import sys

from colorfmt.cli import main

sys.exit(main())
