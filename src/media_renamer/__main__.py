"""Allow ``python -m media_renamer``."""

import sys

from media_renamer.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
