"""
versionfs Shell Module

Interactive command shell over a file table.
"""

from .shell import Shell
from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands

__all__ = [
    'Shell',
    'CommandParser',
    'ParsedCommand',
    'BuiltinCommands',
]
