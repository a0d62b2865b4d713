"""
Token Listing Command

Command:
- compio tokens [--count]: Print each whitespace-delimited token of stdin.
"""

import sys
import click
from compio.commands.base import RichCommand, console, error_report, rich_help
from compio.lib.reader import ParseError, TokenReader


@click.command(
    cls=RichCommand,
    short_help="list the tokens of stdin",
    help=rich_help(
        command="tokens",
        description="Print each whitespace-delimited token of stdin",
        usage="compio tokens [--count]",
        args={"<None>": "no arguments"},
    ),
)
@click.option("--count", is_flag=True, help="Print only the number of tokens")
def tokens(count: bool) -> None:
    """
    List or count the tokens on stdin.
    """
    reader: TokenReader = TokenReader(click.get_binary_stream("stdin"))
    seen: int = 0
    try:
        for token in reader:
            seen += 1
            if not count:
                console.print(token, markup=False, emoji=False, highlight=False, soft_wrap=True)
    except ParseError as e:
        error_report(f"token {seen + 1}: {e}")
        sys.exit(1)

    if count:
        console.print(str(seen), highlight=False)
