"""Allow ``python -m branchseed``."""

import sys

from .cli import main

sys.exit(main())
