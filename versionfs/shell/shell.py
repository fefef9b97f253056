"""
versionfs Shell Module

Interactive command-line shell over a FileTable.

Author: versionfs contributors
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands, EXIT_OK, EXIT_USAGE, EXIT_NOT_FOUND
from versionfs.core.config_loader import Config
from versionfs.filesystem import FileTable
from versionfs.logger import Logger, get_logger


class Shell:
    """
    versionfs Interactive Shell.

    Example:
        >>> shell = Shell(FileTable())
        >>> shell.run_script('create a.txt /docs hello\\ncat a.txt /docs')
        0
    """

    def __init__(
        self,
        table: Optional[FileTable] = None,
        config: Optional[Config] = None,
        stdout: Optional[TextIO] = None
    ):
        self._config = config or Config()
        self._table = table if table is not None else FileTable()
        self._out = stdout
        self._logger = get_logger('shell')
        self._parser = CommandParser(history_size=self._config.shell.history_size)
        self._builtins = BuiltinCommands(self)
        self._exiting = False

    @property
    def table(self) -> FileTable:
        return self._table

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def exiting(self) -> bool:
        return self._exiting

    def write(self, text: str) -> None:
        """Write a line of command output."""
        print(text, file=self._out if self._out is not None else sys.stdout)

    def run(self) -> None:
        """Run the read-eval-print loop until exit or EOF."""
        self.write(self._config.app.banner)
        self.write("Type 'help' for a list of commands.")

        while not self._exiting:
            try:
                line = input(self._config.shell.prompt)
            except EOFError:
                self.write("")
                break
            except KeyboardInterrupt:
                self.write("^C")
                continue

            self.execute_line(line)

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Returns:
            Exit code of the last command run
        """
        try:
            commands = self._parser.parse(line)
        except ValueError as e:
            self.write(f"shell: {e}")
            return EXIT_USAGE

        exit_code = EXIT_OK
        for cmd in commands:
            exit_code = self._execute_command(cmd)
            if self._exiting:
                break
        return exit_code

    def _execute_command(self, cmd: ParsedCommand) -> int:
        if not self._builtins.is_builtin(cmd.command):
            self.write(f"{cmd.command}: command not found")
            return EXIT_NOT_FOUND

        self._logger.debug("Running command", context={'command': cmd.command})
        return self._builtins.execute(cmd.command, cmd.args)

    def run_script(self, script: str) -> int:
        """
        Run several lines of commands.

        Returns:
            Last exit code
        """
        exit_code = EXIT_OK

        for line in script.split('\n'):
            if self._exiting:
                break
            line = line.strip()
            if line and not line.startswith('#'):
                exit_code = self.execute_line(line)

        return exit_code

    def request_exit(self) -> None:
        self._exiting = True

