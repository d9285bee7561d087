"""Allow running localecheck as a module: python -m localecheck."""

import sys

from localecheck.cli import main

sys.exit(main())
