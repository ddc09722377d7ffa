"""
Module execution entry point.

Allows running with: python -m mrkl_cli
"""

import sys
from mrkl_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
