"""
Entry point for running the challenger package as a module.

Usage:
    python -m challenger --table path/to/table.csv
"""

from .challenger_solver import main

if __name__ == '__main__':
    main()
