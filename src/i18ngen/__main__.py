"""Allow ``python -m i18ngen``."""

import sys

from i18ngen.cli import main

sys.exit(main())
