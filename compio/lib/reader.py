r"""
Buffered whitespace token reader.

Provides `TokenReader`, which pulls raw bytes from an input source (standard
input by default), splits them on whitespace and parses one token at a time
into the requested scalar type.

The reader handles:
- Lazy, chunked buffering: memory stays bounded by one chunk plus the token
  being scanned
- Tokens that straddle a refill boundary
- Strict numeric parsing with range checks for the fixed-width integer kinds
- Single-character reads that do not consume the rest of a token
- Exception-style (`next_<kind>`) and result-style (`read`) access

Whitespace is exactly space, tab, newline and carriage return.

Example:
    reader = TokenReader()
    n: int = reader.next_i32()
    xs: list[float] = [reader.next_f64() for _ in range(n)]
"""

import io
import re
import sys
from typing import Any, Callable, Final, Self
from compio.config.settings import appsettings
from compio.lib.log import LOG
from compio.models.dataModel import FailureKind, ReadResult, TokenType

_BLANK: Final[re.Pattern[bytes]] = re.compile(rb"[ \t\n\r]*")
_WORD: Final[re.Pattern[bytes]] = re.compile(rb"[^ \t\n\r]*")
_SIGNED: Final[re.Pattern[bytes]] = re.compile(rb"[+-]?[0-9]+")
_UNSIGNED: Final[re.Pattern[bytes]] = re.compile(rb"\+?[0-9]+")
_FLOAT: Final[re.Pattern[bytes]] = re.compile(
    rb"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_INT_RANGES: Final[dict[TokenType, tuple[int, int]]] = {
    TokenType.I32: (-(2**31), 2**31 - 1),
    TokenType.I64: (-(2**63), 2**63 - 1),
    TokenType.U32: (0, 2**32 - 1),
    TokenType.USIZE: (0, 2**64 - 1),
}


class ReaderError(Exception):
    """Base class for failures reported by a TokenReader."""


class EndOfStream(ReaderError):
    """The source is finished and no token remains in the buffer."""

    def __init__(self: Self, message: str = "end of stream") -> None:
        super().__init__(message)


class ParseError(ReaderError, ValueError):
    """A token was read but is not a valid literal of the requested kind.

    Attributes:
        token: The offending token, decoded for display
        kind: The kind that was requested
    """

    def __init__(self: Self, token: str, kind: TokenType, reason: str) -> None:
        self.token: str = token
        self.kind: TokenType = kind
        super().__init__(f"cannot parse {token!r} as {kind.value}: {reason}")


def _shown(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _utf8_width(lead: int) -> int:
    """Length of the UTF-8 sequence introduced by `lead` (1 if invalid)."""
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 1


class TokenReader:
    """Whitespace token reader with typed, on-demand parsing.

    The reader is the single owner of its source; nothing else should read
    from the same stream while it is in use.

    States:
        Ready: the next call attempts to produce a token
        Exhausted: the source has signalled end-of-input and the buffer holds
            no further token; every call fails with EndOfStream

    Attributes:
        chunk_size: Bytes requested from the source per refill
    """

    def __init__(self: Self, source: Any = None, chunk_size: int | None = None) -> None:
        """Initialize an empty reader. No I/O happens here.

        Args:
            source: Binary (or text) stream to read; defaults to the
                process's standard input
            chunk_size: Bytes per refill; defaults to appsettings.chunk_size

        Raises:
            ValueError: If chunk_size is not positive
        """
        self.chunk_size: int = (
            chunk_size if chunk_size is not None else appsettings.chunk_size
        )
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self._source: Any = source
        self._pull: Callable[[int], bytes | str] | None = None
        self._buffer: bytearray = bytearray()
        self._cursor: int = 0
        self._finished: bool = False
        self._received: int = 0

    @classmethod
    def from_str(cls, text: str, chunk_size: int | None = None) -> Self:
        """Build a reader over in-memory text instead of stdin."""
        return cls(io.BytesIO(text.encode("utf-8")), chunk_size=chunk_size)

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int | None = None) -> Self:
        """Build a reader over in-memory bytes instead of stdin."""
        return cls(io.BytesIO(data), chunk_size=chunk_size)

    @property
    def exhausted(self: Self) -> bool:
        """True once the source is finished and every buffered byte is consumed."""
        return self._finished and self._cursor >= len(self._buffer)

    # Buffer management

    def _attach(self: Self) -> Callable[[int], bytes | str]:
        if self._pull is None:
            source: Any = self._source if self._source is not None else sys.stdin.buffer
            # read1 returns whatever is available, so a terminal line is
            # handed over without waiting for a full chunk
            self._pull = getattr(source, "read1", None) or source.read
            LOG(f"Reader attached to {getattr(source, 'name', type(source).__name__)}")
        return self._pull

    def _fill(self: Self) -> bool:
        """Append the next chunk to the buffer.

        Drops the consumed prefix first, so the cursor is 0 afterwards.

        Returns:
            False if the source is finished; it is never read again
        """
        if self._finished:
            return False

        chunk: bytes | str = self._attach()(self.chunk_size)
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if not chunk:
            self._finished = True
            LOG(f"Source finished after {self._received} bytes")
            return False

        del self._buffer[: self._cursor]
        self._cursor = 0
        self._buffer += chunk
        self._received += len(chunk)
        return True

    def _skip_blank(self: Self) -> bool:
        """Move the cursor to the next non-whitespace byte, refilling as needed.

        Returns:
            False if input ended before any non-whitespace byte
        """
        while True:
            self._cursor = _BLANK.match(self._buffer, self._cursor).end()
            if self._cursor < len(self._buffer):
                return True
            if not self._fill():
                return False

    def _next_raw(self: Self) -> bytes:
        if not self._skip_blank():
            raise EndOfStream()

        end: int = _WORD.match(self._buffer, self._cursor).end()
        while end == len(self._buffer):
            scanned: int = end - self._cursor
            if not self._fill():
                break
            end = _WORD.match(self._buffer, scanned).end()

        token: bytes = bytes(self._buffer[self._cursor : end])
        self._cursor = end
        return token

    # Typed accessors

    def _next_integer(self: Self, kind: TokenType) -> int:
        token: bytes = self._next_raw()
        pattern = _UNSIGNED if kind in (TokenType.U32, TokenType.USIZE) else _SIGNED
        if not pattern.fullmatch(token):
            raise ParseError(_shown(token), kind, "invalid digit")

        low, high = _INT_RANGES[kind]
        try:
            value: int = int(token.decode("ascii"))
        except ValueError:
            # More digits than int() accepts
            raise ParseError(_shown(token), kind, "out of range") from None
        if not low <= value <= high:
            raise ParseError(_shown(token), kind, "out of range")
        return value

    def next_i32(self: Self) -> int:
        """Read the next token as a 32-bit signed integer."""
        return self._next_integer(TokenType.I32)

    def next_i64(self: Self) -> int:
        """Read the next token as a 64-bit signed integer."""
        return self._next_integer(TokenType.I64)

    def next_u32(self: Self) -> int:
        """Read the next token as a 32-bit unsigned integer."""
        return self._next_integer(TokenType.U32)

    def next_usize(self: Self) -> int:
        """Read the next token as a 64-bit unsigned integer."""
        return self._next_integer(TokenType.USIZE)

    def next_f64(self: Self) -> float:
        """Read the next token as a float.

        Accepts an optional sign, digits with optional fraction and exponent,
        and inf/infinity/nan in any case.
        """
        token: bytes = self._next_raw()
        if not _FLOAT.fullmatch(token):
            raise ParseError(_shown(token), TokenType.F64, "invalid float literal")
        return float(token.decode("ascii"))

    def next_char(self: Self) -> str:
        """Read the next non-whitespace character.

        Only the character itself is consumed; the rest of its token stays
        in the buffer.
        """
        if not self._skip_blank():
            raise EndOfStream()

        width: int = _utf8_width(self._buffer[self._cursor])
        while len(self._buffer) - self._cursor < width and self._fill():
            pass

        # A truncated sequence never reaches past its own token
        end: int = min(self._cursor + width, _WORD.match(self._buffer, self._cursor).end())
        raw: bytes = bytes(self._buffer[self._cursor : end])
        self._cursor += len(raw)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ParseError(_shown(raw), TokenType.CHAR, "invalid UTF-8") from None

    def next_token(self: Self) -> str:
        """Read the next token as a string."""
        token: bytes = self._next_raw()
        try:
            return token.decode("utf-8")
        except UnicodeDecodeError:
            raise ParseError(_shown(token), TokenType.TOKEN, "invalid UTF-8") from None

    def next_pair(self: Self) -> tuple[int, int]:
        """Read the next two tokens as 32-bit signed integers."""
        first: int = self.next_i32()
        return first, self.next_i32()

    def read(self: Self, kind: TokenType | str) -> ReadResult:
        """Read the next value of `kind` without raising on read failures.

        Args:
            kind: A TokenType or its string value (e.g. "i32")

        Returns:
            ReadResult with the value, or with failure and error set

        Raises:
            ValueError: If kind is not a known TokenType
        """
        kind = TokenType(kind)
        accessor: Callable[[], int | float | str] = getattr(self, f"next_{kind.value}")
        try:
            return ReadResult(value=accessor(), kind=kind)
        except EndOfStream as e:
            return ReadResult(
                kind=kind,
                error=str(e),
                failure=FailureKind.END_OF_STREAM,
                success=False,
            )
        except ParseError as e:
            return ReadResult(
                kind=kind,
                error=str(e),
                failure=FailureKind.PARSE_ERROR,
                success=False,
            )

    def __iter__(self: Self) -> Self:
        return self

    def __next__(self: Self) -> str:
        try:
            return self.next_token()
        except EndOfStream:
            raise StopIteration from None
