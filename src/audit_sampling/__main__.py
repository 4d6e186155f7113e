"""Allow ``python -m audit_sampling``."""

import sys

from audit_sampling.cli import main

sys.exit(main())
