"""Entry point for running the server as a module.

Usage:
    python -m simplemcp
"""

import sys

from simplemcp.cli.serve import main

if __name__ == "__main__":
    sys.exit(main())
