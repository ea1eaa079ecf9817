"""Allow ``python -m hotseat_show``."""

import sys

from .cli import main

sys.exit(main())
