#!/usr/bin/env python3
"""
versionfs - entry point

Runs the demonstration sequence against a fresh file table, or starts the
interactive shell with ``--shell``.

Author: versionfs contributors
Version: 1.0.0
"""

import argparse
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from versionfs.core.config_loader import Config, load_config
from versionfs.exceptions import ConfigError
from versionfs.filesystem import FileTable, OperationResult
from versionfs.logger import Logger, LogLevel, get_logger
from versionfs.shell import Shell


DEMO_NAME = 'example.txt'


def demo_steps(table: FileTable) -> List[Tuple[str, Callable[[], OperationResult]]]:
    """The demonstration sequence as (description, call) pairs."""
    return [
        ("Create a file",
         lambda: table.create(DEMO_NAME, '/documents', 'This is a sample file.')),
        ("Save a new version of the file",
         lambda: table.save_version(DEMO_NAME, '/documents',
                                    'This is an updated version of the file.')),
        ("Switch to an older version of the file",
         lambda: table.switch_version(DEMO_NAME, '/documents', 1)),
        ("Copy the file to a different path",
         lambda: table.copy(DEMO_NAME, '/documents', '/backup')),
        ("Move the file to a different path",
         lambda: table.move(DEMO_NAME, '/documents', '/archive')),
        ("Delete the file",
         lambda: table.delete(DEMO_NAME, '/archive')),
    ]


def run_demo(table: Optional[FileTable] = None, out: Optional[TextIO] = None) -> int:
    """
    Run the demonstration sequence, stopping at the first failure.

    Returns:
        0 if every step succeeded, 1 otherwise
    """
    out = out if out is not None else sys.stdout
    table = table if table is not None else FileTable()
    logger = get_logger('demo')

    for description, step in demo_steps(table):
        result = step()
        if not result:
            logger.warning(
                f"{description} failed",
                context={'key': result.key, 'kind': result.kind.value}
            )
            print(result.error, file=out)
            return 1

        print(f"{description}: ok ({result.key})", file=out)
        if result.report is not None:
            print(result.report.render(), file=out)

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='versionfs',
        description='In-memory versioned file table',
    )
    parser.add_argument('--shell', action='store_true',
                        help='start the interactive shell instead of the demo')
    parser.add_argument('--config', metavar='PATH',
                        help='JSON configuration file')
    parser.add_argument('--log-level', metavar='LEVEL',
                        help='override the configured log level')
    return parser


def setup_logging(config: Config, level_override: Optional[str] = None) -> None:
    """Initialize logging from configuration."""
    level = LogLevel.from_name(level_override or config.logging.level)
    Logger.initialize(
        level=level,
        log_file=config.logging.log_file,
        use_colors=config.logging.use_colors,
        console_output=config.logging.console_output,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Sequence:
    1. Parse arguments
    2. Load configuration
    3. Initialize logging
    4. Run the demo or the shell
    """
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"versionfs: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(config, args.log_level)
    except (ValueError, OSError) as e:
        print(f"versionfs: {e}", file=sys.stderr)
        return 2

    table = FileTable()

    if args.shell:
        shell = Shell(table=table, config=config)
        try:
            shell.run()
        except KeyboardInterrupt:
            print("\nInterrupted")
        return 0

    return run_demo(table)


if __name__ == '__main__':
    sys.exit(main())
