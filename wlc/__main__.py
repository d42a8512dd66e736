"""Allow ``python -m wlc``."""

import sys

from wlc.cli import main

if __name__ == "__main__":
    sys.exit(main())
