"""Allows `python -m sdlauncher BUILD_ID`."""

import sys

from sdlauncher.cli import main

if __name__ == "__main__":
    sys.exit(main())
