# src/charfreq/cli.py
import sys
import argparse

# Module imports
from charfreq.core.textfile import TextFile

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Count how often each character (byte) occurs in a text file."
    )
    parser.add_argument("path", type=str, help="Text file to analyze")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the full frequency table and summary statistics"
    )
    return parser

def format_totals(table) -> str:
    """One-line summary used when no verbose report is requested."""
    return f"{sum(table.values())} characters, {len(table)} distinct"

def main(argv=None):
    try:
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        result = TextFile(args.path).count(verbose=args.verbose)
        if not result.ok:
            # Diagnostic already written to stderr
            sys.exit(1)

        if not args.verbose:
            print(format_totals(result.table))

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
