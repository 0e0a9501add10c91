"""Allow ``python -m winpath``."""

import sys

from winpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
