"""Exception hierarchy and operation result tests."""

import unittest

from versionfs.exceptions import (
    ErrorKind,
    FileTableException,
    AlreadyExistsError,
    NotFoundError,
    InvalidVersionError,
    ConfigError,
)
from versionfs.filesystem import OperationResult, VersionReport


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_kinds_and_codes(self):
        cases = [
            (AlreadyExistsError('/d/a.txt'), ErrorKind.ALREADY_EXISTS, 5001),
            (NotFoundError('/d/a.txt'), ErrorKind.NOT_FOUND, 5002),
            (InvalidVersionError('/d/a.txt', requested=3, current=2), ErrorKind.INVALID_VERSION, 5003),
        ]
        for exc, kind, code in cases:
            with self.subTest(exc=type(exc).__name__):
                self.assertIsInstance(exc, FileTableException)
                self.assertEqual(exc.kind, kind)
                self.assertEqual(exc.error_code, code)
                self.assertEqual(exc.key, '/d/a.txt')
                self.assertEqual(exc.context['key'], '/d/a.txt')
                self.assertIn(str(code), str(exc))

    def test_invalid_version_context(self):
        exc = InvalidVersionError('/d/a.txt', requested=0, current=4)
        self.assertEqual(exc.requested, 0)
        self.assertEqual(exc.current, 4)
        self.assertEqual(exc.context['requested'], 0)
        self.assertIn("Invalid version number", exc.message)

    def test_config_error(self):
        exc = ConfigError("bad", source="cfg.json")
        self.assertEqual(exc.error_code, 6000)
        self.assertIn("source=cfg.json", str(exc))


class TestOperationResult(unittest.TestCase):
    """Test tagged results."""

    def test_ok(self):
        result = OperationResult.ok('create', '/d/a.txt')
        self.assertTrue(result)
        self.assertIsNone(result.kind)
        self.assertIs(result.raise_for_error(), result)

    def test_failure(self):
        error = NotFoundError('/d/a.txt')
        result = OperationResult.failure('delete', '/d/a.txt', error)

        self.assertFalse(result)
        self.assertEqual(result.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(result.message, error.message)
        with self.assertRaises(NotFoundError):
            result.raise_for_error()

    def test_report_message(self):
        report = VersionReport(name='a.txt', path='/d', version=1, current_version=2, contents='v2')
        result = OperationResult.ok('switch_version', '/d/a.txt', report=report)
        self.assertEqual(result.message, "Old version of a.txt (Version 1):\nv2")


if __name__ == '__main__':
    unittest.main()
