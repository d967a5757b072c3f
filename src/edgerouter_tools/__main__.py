"""Allow ``python -m edgerouter_tools``."""

import sys

from edgerouter_tools.cli import main

sys.exit(main())
