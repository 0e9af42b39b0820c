#!/usr/bin/env python3
"""
Convenience script to solve a Challenger table.

This script provides a simple interface to the Challenger Solver pipeline.

Usage:
    python process_table.py puzzle.csv
    python process_table.py puzzle.csv --output my_output/ --render
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from challenger.challenger_solver import main

if __name__ == '__main__':
    if len(sys.argv) > 1 and not sys.argv[1].startswith('-'):
        sys.argv.insert(1, '--table')
    main()
