"""
Howard CLI entry point.

Usage:
    python -m howard.cli name isUser hasCart --guard
    python -m howard.cli bench
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
