"""
compio: whitespace token reading for competitive programming.

Provides a buffered reader that pulls tokens from standard input and parses
them on demand into integers, floats or characters.
"""

from compio.lib.reader import EndOfStream, ParseError, ReaderError, TokenReader
from compio.models.dataModel import FailureKind, ReadResult, TokenType

__version__ = "0.1.0"

__all__ = [
    "TokenReader",
    "ReaderError",
    "EndOfStream",
    "ParseError",
    "TokenType",
    "FailureKind",
    "ReadResult",
]
