"""Entry point for ``python -m recomp``."""

import sys

from recomp.cli import main

if __name__ == "__main__":
    sys.exit(main())
