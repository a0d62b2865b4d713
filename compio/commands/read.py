"""
Typed Read Command

Reads standard input as a repeating record of typed values and prints one
value per line. Useful for checking that a test input matches the shape a
solution expects before submitting.

Command:
- compio read [--once] [--strict] TYPE...: Read records of TYPE values.
"""

import sys
import click
from compio.commands.base import RichCommand, console, error_report, rich_help
from compio.config.settings import appsettings
from compio.lib.reader import TokenReader
from compio.models.dataModel import FailureKind, ReadResult, TokenType

TYPE_NAMES: list[str] = [kind.value for kind in TokenType]


def records_read(
    reader: TokenReader, kinds: list[TokenType], once: bool = False, strict: bool = False
) -> int:
    """
    Read records of `kinds` from `reader` and print every value.

    Parse errors are reported and skipped, or stop reading when `strict`.
    Input that ends in the middle of a record is reported as incomplete.

    :param reader: The reader to consume.
    :param kinds: The types making up one record.
    :param once: Read a single record only.
    :param strict: Stop at the first parse error.
    :return: Number of failures reported.
    """
    failures: int = 0
    while True:
        for position, kind in enumerate(kinds):
            result: ReadResult = reader.read(kind)
            if result.success:
                console.print(
                    str(result.value), markup=False, emoji=False, highlight=False, soft_wrap=True
                )
                continue

            if result.failure == FailureKind.END_OF_STREAM:
                if position or once:
                    failures += 1
                    error_report(
                        f"incomplete record: input ended after {position} of {len(kinds)} values"
                    )
                return failures

            failures += 1
            error_report(result.error or "parse error")
            if strict:
                return failures

        if once:
            return failures


@click.command(
    cls=RichCommand,
    short_help="read typed values from stdin",
    help=rich_help(
        command="read",
        description="Read stdin as a repeating record of typed values",
        usage="compio read [--once] [--strict] TYPE...",
        args={"TYPE": f"one of {', '.join(TYPE_NAMES)}"},
    ),
)
@click.option("--once", is_flag=True, help="Read a single record and stop")
@click.option("--strict", is_flag=True, help="Stop at the first parse error")
@click.argument("types", nargs=-1, required=True, type=click.Choice(TYPE_NAMES))
def read(types: tuple[str, ...], once: bool, strict: bool) -> None:
    """
    Read typed records from stdin.
    """
    reader: TokenReader = TokenReader(click.get_binary_stream("stdin"))
    failures: int = records_read(
        reader,
        [TokenType(name) for name in types],
        once=once,
        strict=strict or appsettings.strict,
    )
    if failures:
        sys.exit(1)
