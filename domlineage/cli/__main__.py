"""
domlineage CLI entry point.

Usage:
    python -m domlineage.cli run
    python -m domlineage.cli verdicts
    python -m domlineage.cli explain <n>
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
