#!/usr/bin/env python3
"""
Speed Reader Entry Point

This file serves as the main entry point when running from a source checkout,
e.g. ``cat book.txt | python main.py --wpm=400``. It sets up the Python path
and imports the actual main function from the cli module.
"""

import sys
import os

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

# Import and run the main function
from speedreader.cli import main

if __name__ == "__main__":
    sys.exit(main())
