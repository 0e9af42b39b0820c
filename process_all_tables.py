#!/usr/bin/env python3
"""
Solve every Challenger table in the current directory and print a summary.
"""

import sys
import os
import glob

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from challenger.challenger_solver import ChallengerSolver
from challenger.solver import SolveStatus


def main():
    """Process all .csv and .txt tables in the current directory."""
    table_files = sorted(glob.glob("*.csv") + glob.glob("*.txt"))

    if not table_files:
        print("No .csv or .txt files found in current directory!")
        return

    print(f"Found {len(table_files)} tables to process")
    print("=" * 60)

    solver = ChallengerSolver(save_output=True, render=True)
    output_dir = "output"

    results = {
        'solved': [],
        'unsolved': [],
        'gave_up': [],
        'error': []
    }

    for i, table_path in enumerate(table_files, 1):
        print(f"\n[{i}/{len(table_files)}] Processing {table_path}...")

        try:
            result = solver.process_table(table_path, output_dir)
            if result['status'] is SolveStatus.SOLVED:
                results['solved'].append(table_path)
            elif result['status'] is SolveStatus.BUDGET_EXHAUSTED:
                results['gave_up'].append(table_path)
            else:
                results['unsolved'].append(table_path)
        except ValueError as e:
            print(f"Error processing {table_path}: {e}")
            results['error'].append(table_path)

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(table_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(table_files)}")
    print(f"⏱️  Gave up:   {len(results['gave_up'])}/{len(table_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(table_files)}")

    if results['solved']:
        print(f"\nSolved tables: {', '.join(results['solved'])}")

    print(f"\nSolutions saved to: {output_dir}/")


if __name__ == '__main__':
    main()
