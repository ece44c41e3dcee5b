"""Allow ``python -m witcher_tracker``."""

from __future__ import annotations

import sys

from witcher_tracker.cli import main


sys.exit(main())
