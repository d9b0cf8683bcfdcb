"""
Entry point for running miasma as a module: python -m miasma
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
