"""Allow ``python -m webpath``."""

import sys

from webpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
