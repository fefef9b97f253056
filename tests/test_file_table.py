"""
File table tests.

Run with: python -m pytest tests -v
"""

import unittest

from versionfs.exceptions import (
    ErrorKind,
    AlreadyExistsError,
    NotFoundError,
    InvalidVersionError,
)
from versionfs.filesystem import FileTable, FileRecord


class TestCreateDelete(unittest.TestCase):
    """Create and delete."""

    def setUp(self):
        self.table = FileTable()

    def test_create_starts_at_version_one(self):
        result = self.table.create('a.txt', '/d', 'v1')

        self.assertTrue(result.success)
        self.assertIsNone(result.kind)
        self.assertEqual(result.key, '/d/a.txt')

        record = self.table.stat('a.txt', '/d')
        self.assertEqual(record, FileRecord(name='a.txt', path='/d', contents='v1', version=1))

    def test_create_existing_fails_without_modification(self):
        self.table.create('a.txt', '/d', 'v1')
        self.table.save_version('a.txt', '/d', 'v2')

        result = self.table.create('a.txt', '/d', 'other')

        self.assertFalse(result)
        self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
        self.assertIsInstance(result.error, AlreadyExistsError)
        record = self.table.stat('a.txt', '/d')
        self.assertEqual(record.contents, 'v2')
        self.assertEqual(record.version, 2)
        self.assertEqual(len(self.table), 1)

    def test_same_name_in_different_directories(self):
        self.assertTrue(self.table.create('a.txt', '/d', 'one'))
        self.assertTrue(self.table.create('a.txt', '/e', 'two'))

        self.assertEqual(len(self.table), 2)
        self.assertEqual(self.table.stat('a.txt', '/e').contents, 'two')

    def test_delete_then_absent(self):
        self.table.create('a.txt', '/d', 'v1')

        self.assertTrue(self.table.delete('a.txt', '/d'))
        self.assertFalse(self.table.exists('a.txt', '/d'))

        for result in (
            self.table.delete('a.txt', '/d'),
            self.table.save_version('a.txt', '/d', 'x'),
            self.table.switch_version('a.txt', '/d', 1),
            self.table.copy('a.txt', '/d', '/b'),
            self.table.move('a.txt', '/d', '/b'),
        ):
            self.assertEqual(result.kind, ErrorKind.NOT_FOUND)
            self.assertIsInstance(result.error, NotFoundError)

        self.assertTrue(self.table.create('a.txt', '/d', 'again'))
        self.assertEqual(self.table.stat('a.txt', '/d').version, 1)

    def test_equivalent_paths_share_a_key(self):
        self.table.create('a.txt', '/d', 'v1')

        for path in ('/d/', '//d', '/x/../d', '/./d', '\\d'):
            with self.subTest(path=path):
                result = self.table.create('a.txt', path, 'dup')
                self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
                self.assertTrue(self.table.exists('a.txt', path))

    def test_relative_and_absolute_paths_differ(self):
        self.table.create('a.txt', '/d', 'abs')
        self.assertTrue(self.table.create('a.txt', 'd', 'rel'))
        self.assertEqual(len(self.table), 2)

    def test_malformed_name_is_rejected(self):
        with self.assertRaises(ValueError):
            self.table.create('x/a.txt', '/d', 'v1')
        for name in ('', '.', '..', 'x\\a.txt'):
            with self.assertRaises(ValueError):
                self.table.create(name, '/d', 'v1')
        self.assertEqual(len(self.table), 0)


class TestCopy(unittest.TestCase):
    """Copy."""

    def setUp(self):
        self.table = FileTable()
        self.table.create('a.txt', '/d', 'v1')
        self.table.save_version('a.txt', '/d', 'v2')

    def test_copy_keeps_version_and_contents(self):
        result = self.table.copy('a.txt', '/d', '/b')

        self.assertTrue(result)
        self.assertEqual(result.key, '/b/a.txt')
        copied = self.table.stat('a.txt', '/b')
        self.assertEqual(copied.version, 2)
        self.assertEqual(copied.contents, 'v2')
        self.assertEqual(copied.path, '/b')
        self.assertEqual(self.table.stat('a.txt', '/d').path, '/d')

    def test_copy_is_independent(self):
        self.table.copy('a.txt', '/d', '/b')

        self.table.save_version('a.txt', '/b', 'copy-v3')
        original = self.table.stat('a.txt', '/d')
        self.assertEqual(original.version, 2)
        self.assertEqual(original.contents, 'v2')

        self.table.save_version('a.txt', '/d', 'orig-v3')
        self.table.save_version('a.txt', '/d', 'orig-v4')
        copied = self.table.stat('a.txt', '/b')
        self.assertEqual(copied.version, 3)
        self.assertEqual(copied.contents, 'copy-v3')

    def test_copy_onto_occupied_destination(self):
        self.table.create('a.txt', '/b', 'other')

        result = self.table.copy('a.txt', '/d', '/b')

        self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
        self.assertEqual(result.key, '/b/a.txt')
        self.assertEqual(self.table.stat('a.txt', '/b').contents, 'other')
        self.assertEqual(self.table.stat('a.txt', '/d').contents, 'v2')

    def test_copy_onto_itself(self):
        result = self.table.copy('a.txt', '/d', '/d/')
        self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
        self.assertEqual(len(self.table), 1)

    def test_copy_missing_source(self):
        result = self.table.copy('missing.txt', '/d', '/b')
        self.assertEqual(result.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(result.key, '/d/missing.txt')


class TestMove(unittest.TestCase):
    """Move."""

    def setUp(self):
        self.table = FileTable()
        self.table.create('a.txt', '/d', 'v1')
        self.table.save_version('a.txt', '/d', 'v2')

    def test_move_rekeys_record(self):
        result = self.table.move('a.txt', '/d', '/e')

        self.assertTrue(result)
        self.assertFalse(self.table.exists('a.txt', '/d'))
        self.assertEqual(
            self.table.stat('a.txt', '/e'),
            FileRecord(name='a.txt', path='/e', contents='v2', version=2)
        )
        self.assertEqual(len(self.table), 1)

    def test_move_onto_occupied_destination(self):
        self.table.create('a.txt', '/e', 'other')

        result = self.table.move('a.txt', '/d', '/e')

        self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
        self.assertEqual(self.table.stat('a.txt', '/d').contents, 'v2')
        self.assertEqual(self.table.stat('a.txt', '/d').path, '/d')
        self.assertEqual(self.table.stat('a.txt', '/e').contents, 'other')

    def test_move_onto_itself(self):
        result = self.table.move('a.txt', '/d', '/d')
        self.assertEqual(result.kind, ErrorKind.ALREADY_EXISTS)
        self.assertTrue(self.table.exists('a.txt', '/d'))

    def test_moved_record_keeps_versioning(self):
        self.table.move('a.txt', '/d', '/e')
        self.table.save_version('a.txt', '/e', 'v3')
        self.assertEqual(self.table.stat('a.txt', '/e').version, 3)


class TestVersions(unittest.TestCase):
    """save_version and switch_version."""

    def setUp(self):
        self.table = FileTable()
        self.table.create('a.txt', '/d', 'v1')

    def test_version_increments_by_one(self):
        for expected in range(2, 6):
            self.assertTrue(self.table.save_version('a.txt', '/d', f'v{expected}'))
            record = self.table.stat('a.txt', '/d')
            self.assertEqual(record.version, expected)
            self.assertEqual(record.contents, f'v{expected}')

    def test_switch_version_reports_latest_contents(self):
        self.table.save_version('a.txt', '/d', 'v2')

        result = self.table.switch_version('a.txt', '/d', 1)

        self.assertTrue(result)
        self.assertEqual(result.report.version, 1)
        self.assertEqual(result.report.current_version, 2)
        self.assertEqual(result.report.contents, 'v2')
        self.assertEqual(str(result.report), "Old version of a.txt (Version 1):\nv2")

    def test_switch_version_bounds(self):
        self.table.save_version('a.txt', '/d', 'v2')
        self.table.save_version('a.txt', '/d', 'v3')

        for version in (1, 2, 3):
            with self.subTest(version=version):
                self.assertTrue(self.table.switch_version('a.txt', '/d', version))

        for version in (0, -1, 4, 100):
            with self.subTest(version=version):
                result = self.table.switch_version('a.txt', '/d', version)
                self.assertEqual(result.kind, ErrorKind.INVALID_VERSION)
                self.assertIsInstance(result.error, InvalidVersionError)
                self.assertEqual(result.error.requested, version)
                self.assertEqual(result.error.current, 3)

    def test_switch_version_does_not_mutate(self):
        before = self.table.stat('a.txt', '/d')
        self.table.switch_version('a.txt', '/d', 1)
        self.assertEqual(self.table.stat('a.txt', '/d'), before)

    def test_switch_version_rejects_non_int(self):
        with self.assertRaises(TypeError):
            self.table.switch_version('a.txt', '/d', '1')


class TestInspection(unittest.TestCase):
    """stat, list_records and get_stats."""

    def setUp(self):
        self.table = FileTable()
        self.table.create('b.txt', '/d', 'bb')
        self.table.create('a.txt', '/d', 'a')
        self.table.create('c.txt', '/e', 'ccc')
        self.table.save_version('c.txt', '/e', 'cccc')

    def test_stat_returns_snapshot(self):
        snapshot = self.table.stat('a.txt', '/d')
        snapshot.contents = 'changed'
        self.assertEqual(self.table.stat('a.txt', '/d').contents, 'a')
        self.assertIsNone(self.table.stat('zzz', '/d'))

    def test_list_records(self):
        keys = [r.key for r in self.table.list_records()]
        self.assertEqual(keys, ['/d/a.txt', '/d/b.txt', '/e/c.txt'])

        keys = [r.key for r in self.table.list_records('/d/')]
        self.assertEqual(keys, ['/d/a.txt', '/d/b.txt'])

    def test_contains_uses_normalized_key(self):
        self.assertIn('/d//a.txt', self.table)
        self.assertNotIn('/d/z.txt', self.table)

    def test_get_stats(self):
        stats = self.table.get_stats()
        self.assertEqual(stats['total_files'], 3)
        self.assertEqual(stats['directories'], 2)
        self.assertEqual(stats['total_size'], 1 + 2 + 4)
        self.assertEqual(stats['max_version'], 2)

    def test_empty_table_stats(self):
        self.assertEqual(FileTable().get_stats()['max_version'], 0)

    def test_tables_are_independent(self):
        other = FileTable()
        self.assertEqual(len(other), 0)
        other.create('a.txt', '/d', 'x')
        self.assertEqual(self.table.stat('a.txt', '/d').contents, 'a')


class TestScenario(unittest.TestCase):
    """End-to-end walk through every operation."""

    def test_example_scenario(self):
        table = FileTable()

        self.assertTrue(table.create('a.txt', '/d', 'v1'))
        self.assertEqual(table.stat('a.txt', '/d').version, 1)

        self.assertTrue(table.save_version('a.txt', '/d', 'v2'))
        self.assertEqual(table.stat('a.txt', '/d').version, 2)

        report = table.switch_version('a.txt', '/d', 1).report
        self.assertEqual(report.contents, 'v2')

        self.assertTrue(table.copy('a.txt', '/d', '/b'))
        self.assertEqual(table.stat('a.txt', '/b').version, 2)

        self.assertTrue(table.move('a.txt', '/d', '/e'))
        self.assertFalse(table.exists('a.txt', '/d'))
        self.assertEqual(table.stat('a.txt', '/e').version, 2)

        self.assertTrue(table.delete('a.txt', '/e'))
        self.assertFalse(table.exists('a.txt', '/e'))
        self.assertEqual(table.delete('a.txt', '/e').kind, ErrorKind.NOT_FOUND)

        self.assertEqual([r.key for r in table.list_records()], ['/b/a.txt'])


if __name__ == '__main__':
    unittest.main()
