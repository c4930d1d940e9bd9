"""Allow ``python -m importsweep``."""

import sys

from importsweep.cli import main

sys.exit(main())
