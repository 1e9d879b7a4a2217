"""
refined CLI entry point.

Usage:
    python -m refined.cli list
    python -m refined.cli check <predicate> <value>
    python -m refined.cli explain <predicate>
    python -m refined.cli scan <predicate> <text>
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
