"""
Command Parser Module

Splits shell input into commands and arguments.

Author: versionfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    SEMICOLON = "semicolon"


@dataclass
class Token:
    """A parsed token."""
    type: TokenType
    value: str


@dataclass
class ParsedCommand:
    """A parsed command with its arguments."""
    command: str
    args: List[str] = field(default_factory=list)


class CommandParser:
    """
    Parses shell command lines.

    Handles:
    - Command and arguments separated by whitespace
    - Single and double quoted strings (``""`` is an empty argument)
    - Backslash escapes
    - Several commands on one line separated by ``;``
    - ``#`` comments at the start of a line

    Example:
        >>> parser = CommandParser()
        >>> cmds = parser.parse('create a.txt /docs "hello world"; ls /docs')
        >>> [c.command for c in cmds]
        ['create', 'ls']
    """

    def __init__(self, history_size: int = 1000):
        self._history: List[str] = []
        self._history_size = history_size

    def parse(self, line: str) -> List[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            Parsed commands in order; empty for blank lines and comments

        Raises:
            ValueError: If a quote is left open
        """
        line = line.strip()

        if not line or line.startswith('#'):
            return []

        self._remember(line)

        tokens = self._tokenize(line)

        commands = []
        words: List[str] = []
        for token in tokens:
            if token.type == TokenType.SEMICOLON:
                if words:
                    commands.append(ParsedCommand(command=words[0], args=words[1:]))
                words = []
            else:
                words.append(token.value)

        if words:
            commands.append(ParsedCommand(command=words[0], args=words[1:]))

        return commands

    def parse_one(self, line: str) -> Optional[ParsedCommand]:
        """Parse a line expected to hold a single command."""
        commands = self.parse(line)
        return commands[0] if commands else None

    def _remember(self, line: str) -> None:
        if self._history_size <= 0:
            return
        self._history.append(line)
        if len(self._history) > self._history_size:
            self._history = self._history[-self._history_size:]

    def _tokenize(self, line: str) -> List[Token]:
        """Convert a line into tokens."""
        tokens = []
        current = ""
        # a quoted "" must still produce an (empty) word
        pending = False
        in_quote = None
        i = 0

        while i < len(line):
            char = line[i]

            if char in ('"', "'") and in_quote is None:
                in_quote = char
                pending = True
                i += 1
                continue

            if char == in_quote:
                in_quote = None
                i += 1
                continue

            if char == '\\' and i + 1 < len(line) and in_quote != "'":
                current += line[i + 1]
                pending = True
                i += 2
                continue

            if in_quote:
                current += char
                i += 1
                continue

            if char == ';':
                if pending:
                    tokens.append(Token(TokenType.WORD, current))
                    current, pending = "", False
                tokens.append(Token(TokenType.SEMICOLON, ';'))
                i += 1
                continue

            if char.isspace():
                if pending:
                    tokens.append(Token(TokenType.WORD, current))
                    current, pending = "", False
                i += 1
                continue

            current += char
            pending = True
            i += 1

        if in_quote:
            raise ValueError(f"unterminated quote: {in_quote}")

        if pending:
            tokens.append(Token(TokenType.WORD, current))

        return tokens

    def get_history(self) -> List[str]:
        return list(self._history)
