"""Allow ``python -m mindforge``."""

import sys

from .cli import main

sys.exit(main())
