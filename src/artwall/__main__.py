"""Allow running as python -m artwall."""

import sys

from .cli import main

sys.exit(main())
