"""Module entry point for running with python -m hn2vast."""

import sys

from hn2vast.cli import main

if __name__ == "__main__":
    sys.exit(main())
