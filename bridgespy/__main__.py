"""Allow running Bridge Spy with ``python -m bridgespy``."""

import sys

from bridgespy.cli import main

if __name__ == "__main__":
    sys.exit(main())
