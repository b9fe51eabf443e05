"""Entry point for ``python -m periodization_engine``."""

import sys

from periodization_engine.cli import main

sys.exit(main())
