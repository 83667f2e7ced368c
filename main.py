"""Command-line entry point for chatlib conversions over stdin/stdout."""

import sys

from chatlib.cli import main

if __name__ == "__main__":
    sys.exit(main())
