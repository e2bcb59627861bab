"""Tests for command tokenizing and keyword classification."""

import pytest

from taskline.parser import CommandKeyword, parse_command, tokenize


class TestTokenize:

    def test_collapses_whitespace(self):
        assert tokenize("  deadline   buy\tmilk  /by sun ") == ["deadline", "buy", "milk", "/by", "sun"]

    def test_blank_line(self):
        assert tokenize("   ") == []


class TestCommandKeyword:
    """Test keyword matching."""

    @pytest.mark.parametrize("token,expected", [
        ("todo", CommandKeyword.TODO),
        ("TODO", CommandKeyword.TODO),
        ("DeadLine", CommandKeyword.DEADLINE),
        ("event", CommandKeyword.EVENT),
        ("list", CommandKeyword.LIST),
        ("mark", CommandKeyword.MARK),
        ("unmark", CommandKeyword.UNMARK),
        ("delete", CommandKeyword.DELETE),
        ("find", CommandKeyword.FIND),
        ("help", CommandKeyword.HELP),
        ("BYE", CommandKeyword.BYE),
    ])
    def test_known_keywords(self, token, expected):
        assert CommandKeyword.from_token(token) is expected

    @pytest.mark.parametrize("token", ["blah", "todos", "", "lis"])
    def test_unknown_keywords(self, token):
        assert CommandKeyword.from_token(token) is CommandKeyword.UNRECOGNISED


class TestParseCommand:

    def test_args_kept_unmodified(self):
        command = parse_command("Deadline Buy Milk /by Sunday")

        assert command.keyword is CommandKeyword.DEADLINE
        assert command.args == ["Buy", "Milk", "/by", "Sunday"]
        assert command.raw == "Deadline Buy Milk /by Sunday"

    def test_empty_line_is_unrecognised(self):
        command = parse_command("")

        assert command.keyword is CommandKeyword.UNRECOGNISED
        assert command.args == []
