"""
Shell Built-in Commands

One command per file table operation, plus a few inspection helpers.
Each command returns an exit code: 0 on success, 1 when the operation
failed, 2 on a usage error.

Author: versionfs contributors
Version: 1.0.0
"""

from typing import Callable, List

from versionfs.filesystem import OperationResult, PathResolver


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 127


class BuiltinCommands:
    """Built-in shell commands bound to a shell's file table."""

    USAGE = {
        'create': 'create NAME PATH CONTENTS',
        'rm': 'rm NAME PATH',
        'cp': 'cp NAME SRC_PATH DEST_PATH',
        'mv': 'mv NAME SRC_PATH DEST_PATH',
        'save': 'save NAME PATH CONTENTS',
        'switch': 'switch NAME PATH VERSION',
        'cat': 'cat NAME PATH',
        'stat': 'stat NAME PATH',
        'ls': 'ls [PATH]',
    }

    def __init__(self, shell):
        """
        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._commands: dict[str, Callable[[List[str]], int]] = {
            'help': self.cmd_help,
            'exit': self.cmd_exit,
            'quit': self.cmd_exit,
            'create': self.cmd_create,
            'rm': self.cmd_rm,
            'cp': self.cmd_cp,
            'mv': self.cmd_mv,
            'save': self.cmd_save,
            'switch': self.cmd_switch,
            'cat': self.cmd_cat,
            'stat': self.cmd_stat,
            'ls': self.cmd_ls,
            'stats': self.cmd_stats,
            'history': self.cmd_history,
        }

    def is_builtin(self, name: str) -> bool:
        return name in self._commands

    def execute(self, name: str, args: List[str]) -> int:
        """
        Execute a built-in command.

        Returns:
            Exit code, or 127 if ``name`` is not a builtin
        """
        cmd = self._commands.get(name)
        if cmd is None:
            return EXIT_NOT_FOUND
        try:
            return cmd(args)
        except (TypeError, ValueError) as e:
            self._shell.write(f"{name}: {e}")
            return EXIT_USAGE

    def _usage(self, name: str) -> int:
        self._shell.write(f"usage: {self.USAGE[name]}")
        return EXIT_USAGE

    def _report(self, result: OperationResult) -> int:
        if result:
            return EXIT_OK
        self._shell.logger.warning(
            f"{result.operation} failed",
            context={'key': result.key, 'kind': result.kind.value}
        )
        self._shell.write(f"{result.operation}: {result.message}")
        return EXIT_FAILURE

    @property
    def _table(self):
        return self._shell.table

    def cmd_help(self, args: List[str]) -> int:
        lines = ["Commands:"]
        for name in sorted(self.USAGE):
            lines.append(f"  {self.USAGE[name]}")
        lines.extend([
            "  stats",
            "  history",
            "  help",
            "  exit",
        ])
        self._shell.write("\n".join(lines))
        return EXIT_OK

    def cmd_exit(self, args: List[str]) -> int:
        self._shell.request_exit()
        return EXIT_OK

    def cmd_create(self, args: List[str]) -> int:
        if len(args) != 3:
            return self._usage('create')
        return self._report(self._table.create(*args))

    def cmd_rm(self, args: List[str]) -> int:
        if len(args) != 2:
            return self._usage('rm')
        return self._report(self._table.delete(*args))

    def cmd_cp(self, args: List[str]) -> int:
        if len(args) != 3:
            return self._usage('cp')
        return self._report(self._table.copy(*args))

    def cmd_mv(self, args: List[str]) -> int:
        if len(args) != 3:
            return self._usage('mv')
        return self._report(self._table.move(*args))

    def cmd_save(self, args: List[str]) -> int:
        if len(args) != 3:
            return self._usage('save')
        return self._report(self._table.save_version(*args))

    def cmd_switch(self, args: List[str]) -> int:
        if len(args) != 3:
            return self._usage('switch')
        name, path, raw_version = args
        try:
            version = int(raw_version)
        except ValueError:
            self._shell.write(f"switch: version must be an integer: {raw_version}")
            return EXIT_USAGE

        result = self._table.switch_version(name, path, version)
        if result:
            self._shell.write(result.report.render())
        return self._report(result)

    def cmd_cat(self, args: List[str]) -> int:
        if len(args) != 2:
            return self._usage('cat')
        record = self._table.stat(*args)
        if record is None:
            self._shell.write(f"cat: {PathResolver.key(args[1], args[0])}: No such file")
            return EXIT_FAILURE
        self._shell.write(record.contents)
        return EXIT_OK

    def cmd_stat(self, args: List[str]) -> int:
        if len(args) != 2:
            return self._usage('stat')
        record = self._table.stat(*args)
        if record is None:
            self._shell.write(f"stat: {PathResolver.key(args[1], args[0])}: No such file")
            return EXIT_FAILURE
        for field_name, value in record.to_dict().items():
            self._shell.write(f"{field_name:8s} {value}")
        return EXIT_OK

    def cmd_ls(self, args: List[str]) -> int:
        if len(args) > 1:
            return self._usage('ls')
        path = args[0] if args else None
        for record in self._table.list_records(path):
            self._shell.write(f"{record.key}  v{record.version}  {record.size}")
        return EXIT_OK

    def cmd_stats(self, args: List[str]) -> int:
        for name, value in self._table.get_stats().items():
            self._shell.write(f"{name}: {value}")
        return EXIT_OK

    def cmd_history(self, args: List[str]) -> int:
        for i, line in enumerate(self._shell.parser.get_history(), 1):
            self._shell.write(f"{i:5d}  {line}")
        return EXIT_OK
