"""Allow running the service with ``python -m time_api``."""

import sys

from .main import main

sys.exit(main())
