"""Tests for the token listing command."""

from compio.commands.app import cli


def test_tokens_listed(runner):
    result = runner.invoke(cli, ["tokens"], input="  a  b\n\tc\r\n")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["a", "b", "c"]


def test_tokens_markup_is_literal(runner):
    result = runner.invoke(cli, ["tokens"], input="[bold]x[/bold]")
    assert result.output.splitlines() == ["[bold]x[/bold]"]


def test_tokens_count(runner):
    result = runner.invoke(cli, ["tokens", "--count"], input="1 2 3\n4\n")
    assert result.exit_code == 0
    assert result.output.strip() == "4"


def test_tokens_invalid_utf8(runner):
    result = runner.invoke(cli, ["tokens"], input=b"ok \xff")
    assert result.exit_code == 1
    assert "ok" in result.output.splitlines()
    assert "token 2" in result.output
