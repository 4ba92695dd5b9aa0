"""
Bus Voyage Ledger
=================
Entry point. Run with: python main.py input.txt output.txt
"""

import sys

from src.cli import main

if __name__ == "__main__":
    sys.exit(main())
