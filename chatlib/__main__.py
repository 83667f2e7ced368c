"""Allow ``python -m chatlib``."""

import sys

from .cli import main

sys.exit(main())
