"""Allow ``python -m unreprex``."""

import sys

from unreprex.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
