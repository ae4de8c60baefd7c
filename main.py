"""
onenotemidi - Main entry point
"""
import sys

from onenotemidi.cli import main

if __name__ == "__main__":
    sys.exit(main())
