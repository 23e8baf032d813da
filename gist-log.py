#!/usr/bin/env python3
"""
Wrapper script for the gist-log package.

This provides a simple entry point when running from the source directory.
Users should generally install the package and use the gist-log command.
"""
import sys

from gist_log import main

if __name__ == "__main__":
    sys.exit(main())
