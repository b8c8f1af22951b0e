"""
computor — Entry point.

Solve the equation given on the command line.
"""

import sys

from computor.cli import main


if __name__ == "__main__":
    sys.exit(main())
