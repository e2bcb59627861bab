"""Command line tokenizer and keyword classification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class CommandKeyword(Enum):
    """Closed set of command keywords."""
    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    EVENT = "event"
    DEADLINE = "deadline"
    TODO = "todo"
    FIND = "find"
    HELP = "help"
    UNRECOGNISED = "unrecognised"

    @classmethod
    def from_token(cls, token: str) -> "CommandKeyword":
        """Match a token case-insensitively; anything unknown is UNRECOGNISED."""
        try:
            return cls(token.lower())
        except ValueError:
            return cls.UNRECOGNISED


@dataclass
class ParsedCommand:
    """A tokenized command line."""
    keyword: CommandKeyword
    args: List[str] = field(default_factory=list)
    raw: str = ""


def tokenize(line: str) -> List[str]:
    """Split a line on runs of whitespace."""
    return line.split()


def parse_command(line: str) -> ParsedCommand:
    """Classify the first token of ``line`` and keep the rest untouched."""
    tokens = tokenize(line)
    if not tokens:
        return ParsedCommand(CommandKeyword.UNRECOGNISED, [], line)
    return ParsedCommand(CommandKeyword.from_token(tokens[0]), tokens[1:], line)
