"""Allow running as `python -m termmath`."""

import sys

from .cli import main

sys.exit(main())
