"""Tests for result-style reads."""

import pytest
from compio.lib.reader import TokenReader
from compio.models.dataModel import FailureKind, ReadResult, TokenType


def test_successful_reads_keep_value_types():
    reader = TokenReader.from_str("3 2.5 7000000000 A word")
    results = [
        reader.read(kind)
        for kind in (TokenType.I32, TokenType.F64, TokenType.I64, TokenType.CHAR, TokenType.TOKEN)
    ]
    assert all(result.success for result in results)
    assert [result.value for result in results] == [3, 2.5, 7000000000, "A", "word"]
    assert isinstance(results[0].value, int)
    assert isinstance(results[1].value, float)
    assert results[2].kind == TokenType.I64


def test_end_of_stream_result():
    result = TokenReader.from_str("   \n").read(TokenType.I32)
    assert isinstance(result, ReadResult)
    assert not result.success
    assert result.failure == FailureKind.END_OF_STREAM
    assert result.value is None
    assert result.error


def test_parse_error_result_then_recovery():
    reader = TokenReader.from_str("12x 34")
    failed = reader.read(TokenType.I32)
    assert not failed.success
    assert failed.failure == FailureKind.PARSE_ERROR
    assert "12x" in failed.error
    recovered = reader.read(TokenType.I32)
    assert recovered.success
    assert recovered.value == 34
    assert recovered.failure is None


def test_kind_by_name():
    result = TokenReader.from_str("-9").read("i64")
    assert result.kind == TokenType.I64
    assert result.value == -9


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        TokenReader.from_str("1").read("i128")
