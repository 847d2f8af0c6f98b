"""Run the calculator with ``python -m dayofweek``"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
