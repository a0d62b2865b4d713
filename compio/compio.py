"""
compio Main Module.

This module serves as the command-line entry point for compio.

Features:
- Lists the tokens found on stdin
- Reads stdin as a repeating record of typed values, reporting malformed
  tokens and incomplete records

Examples:
    Check a test case whose lines hold an int and a float:
        $ compio read i32 f64 < case.txt

    Stop at the first malformed token:
        $ compio read --strict i64 < case.txt

    Count tokens:
        $ compio tokens --count < case.txt
"""

from compio import __version__
from compio.commands.app import cli

__all__ = ["__version__", "main"]


def main() -> None:
    """Main entry point for the `compio` console script."""
    cli(prog_name="compio")


if __name__ == "__main__":
    main()
