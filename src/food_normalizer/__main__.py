"""Allow ``python -m food_normalizer``."""

import sys

from food_normalizer.cli import main

sys.exit(main())
