"""
dataModel.py

This module defines the data models used throughout the compio package.
The models leverage Pydantic for validation and type safety.

Features:
- Enum of the scalar kinds a TokenReader can produce.
- Enum of the failure kinds a read can report.
- Result model for result-style (non-raising) reads.

Usage:
Import these models to describe and inspect the outcome of token reads.
"""

from pydantic import BaseModel, Field
from enum import Enum


class TokenType(Enum):
    """
    Scalar kinds understood by the reader.

    Each value names the matching ``next_<value>`` accessor.
    """

    I32 = "i32"
    I64 = "i64"
    U32 = "u32"
    USIZE = "usize"
    F64 = "f64"
    CHAR = "char"
    TOKEN = "token"


class FailureKind(Enum):
    """
    Enum for read failures.
    """

    END_OF_STREAM = "end_of_stream"
    PARSE_ERROR = "parse_error"


class ReadResult(BaseModel):
    """Result of a single typed read.

    Attributes:
        value: The parsed value, None on failure
        kind: The requested scalar kind
        error: Optional error message if the read failed
        failure: Which kind of failure occurred, if any
        success: Whether the read succeeded
    """

    value: int | float | str | None = None
    kind: TokenType
    error: str | None = None
    failure: FailureKind | None = Field(
        default=None, description="Failure kind when success is False."
    )
    success: bool = True
