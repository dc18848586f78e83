"""Allow ``python -m mdfiles`` to run the CLI."""

import sys

from mdfiles.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
