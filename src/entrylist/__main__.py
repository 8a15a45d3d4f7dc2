"""Command-line entry point: ``python -m entrylist``."""
import sys

from entrylist.app.main import main

if __name__ == "__main__":
    sys.exit(main())
