"""
Challenger Solver - Main Application Module
"""

import argparse
import os
import sys

import numpy as np

from .render import render_table_image, save_image
from .grid import Grid
from .solver import DEFAULT_MAX_STEPS, RowSweepSolver, SolveStatus, validate_table
from .table_io import (
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    empty_table,
    format_table,
    load_table,
    save_table,
)

EXIT_INVALID = 1
EXIT_NO_SOLUTION = 2
EXIT_BUDGET_EXHAUSTED = 3


class ChallengerSolver:
    """
    Main class for the Challenger Solver application.

    This class encapsulates the pipeline from a table file on disk to a
    printed, saved and optionally rendered solution.
    """

    def __init__(self, max_steps=DEFAULT_MAX_STEPS, save_output=True, render=False,
                 cell_size=60, debug=False):
        """
        Initialize the Challenger Solver.

        Args:
            max_steps (int | None): Cap on solver steps (None for unbounded)
            save_output (bool): Whether to write the solved table to disk
            render (bool): Whether to also write a PNG of the solved grid
            cell_size (int): Pixel size of one cell in the rendered image
            debug (bool): Print every solver step
        """
        self.max_steps = max_steps
        self.save_output = save_output
        self.render = render
        self.cell_size = cell_size
        self.debug = debug

    def process_table(self, table_path, output_dir='output'):
        """
        Process a Challenger table file through the complete pipeline.

        Pipeline steps:
        1. Load the table
        2. Validate its shape and givens
        3. Solve and report

        Args:
            table_path (str): Path to the input table file
            output_dir (str): Directory to save outputs

        Returns:
            dict: Results containing the input table, the solution (or None),
                  the SolveStatus (None for an invalid table) and the solver message
        """
        print(f"\n{'='*60}")
        print(f"Processing: {os.path.basename(table_path)}")
        print(f"{'='*60}")

        print("\n[1/3] Loading table...")
        table = load_table(table_path)
        print(f"      Table size: {table.shape[0]}x{table.shape[1]}")
        print(format_table(table))

        print("\n[2/3] Validating table...")
        is_valid, reason = validate_table(table)
        if not is_valid:
            print(f"      ✗ Invalid table: {reason}")
            return {'table': table, 'solution': None, 'status': None, 'message': reason}
        free_count = int(np.count_nonzero(table[1:-1, :-1] == 0))
        print(f"      ✓ Table accepted ({free_count} free cells)")

        print("\n[3/3] Solving...")
        solver = RowSweepSolver(max_steps=self.max_steps, debug=self.debug)
        result = solver.solve(Grid.from_table(table))
        solution = None
        if result.status is SolveStatus.SOLVED:
            solution = result.grid.to_table()
            print(f"      ✓ Solved puzzle ({result.message}):")
            print(format_table(solution))

            if self.save_output:
                self._save_results(table_path, output_dir, table, solution)
        elif result.status is SolveStatus.BUDGET_EXHAUSTED:
            print(f"      ✗ Search gave up ({result.message})")
            print("        (Raise --max-steps or pass 0 to search without a limit)")
        else:
            print(f"      ✗ No solution. ({result.message})")

        print(f"\n{'='*60}")
        print("Processing complete!")
        print(f"{'='*60}\n")

        return {'table': table, 'solution': solution, 'status': result.status,
                'message': result.message}

    def _save_results(self, table_path, output_dir, table, solution):
        """
        Save the solved table (and its rendering) to disk.

        Args:
            table_path (str): Original table path (for naming)
            output_dir (str): Output directory
            table (np.ndarray): Input table, used to tell givens from solved cells
            solution (np.ndarray): Solved table
        """
        os.makedirs(output_dir, exist_ok=True)
        base_name = os.path.splitext(os.path.basename(table_path))[0]

        csv_path = os.path.join(output_dir, f"{base_name}_solution.csv")
        save_table(csv_path, solution)
        print(f"\n      Saved {csv_path}")

        if self.render:
            image = render_table_image(solution, table, self.cell_size)
            png_path = os.path.join(output_dir, f"{base_name}_solution.png")
            save_image(png_path, image)
            print(f"      Saved {png_path}")


def main():
    """
    Main entry point for the Challenger Solver application.

    Handles command-line arguments and processes a table file.
    """
    parser = argparse.ArgumentParser(
        description='Challenger Solver - fill the grid so every sum matches',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a table:
    python -m challenger --table puzzle.csv

  Solve and render the result:
    python -m challenger --table puzzle.csv --render

  Search without a step limit:
    python -m challenger --table puzzle.csv --max-steps 0

  Write a blank 6x5 table to fill in:
    python -m challenger --template puzzle.csv
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--table', '-t',
                        help='Path to input table (CSV or whitespace separated)')
    source.add_argument('--template',
                        help='Write a blank table to this path and exit')
    parser.add_argument('--rows', type=int, default=DEFAULT_ROWS,
                        help=f'Rows in the blank table (default: {DEFAULT_ROWS})')
    parser.add_argument('--columns', type=int, default=DEFAULT_COLUMNS,
                        help=f'Columns in the blank table (default: {DEFAULT_COLUMNS})')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory (default: output)')
    parser.add_argument('--max-steps', '-m', type=int, default=DEFAULT_MAX_STEPS,
                        help=f'Solver step limit, 0 for none (default: {DEFAULT_MAX_STEPS})')
    parser.add_argument('--cell-size', '-s', type=int, default=60,
                        help='Rendered cell size in pixels (default: 60)')
    parser.add_argument('--no-save', action='store_true',
                        help='Do not save the solved table')
    parser.add_argument('--render', action='store_true',
                        help='Also save a PNG image of the solved grid')
    parser.add_argument('--debug', action='store_true',
                        help='Print every solver step')

    args = parser.parse_args()

    if args.template:
        save_table(args.template, empty_table(args.rows, args.columns))
        print(f"Blank {args.rows}x{args.columns} table written to {args.template}")
        return

    if not os.path.exists(args.table):
        print(f"Error: Table file not found: {args.table}")
        sys.exit(EXIT_INVALID)

    solver = ChallengerSolver(
        max_steps=args.max_steps or None,
        save_output=not args.no_save,
        render=args.render,
        cell_size=args.cell_size,
        debug=args.debug,
    )

    try:
        result = solver.process_table(args.table, args.output)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(EXIT_INVALID)
    except Exception as e:
        print(f"\nError during processing: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if result['status'] is None:
        sys.exit(EXIT_INVALID)
    if result['status'] is SolveStatus.BUDGET_EXHAUSTED:
        print("Step limit reached before a solution was found.")
        sys.exit(EXIT_BUDGET_EXHAUSTED)
    if result['status'] is SolveStatus.FAILED:
        print("No solution.")
        sys.exit(EXIT_NO_SOLUTION)


if __name__ == '__main__':
    main()
