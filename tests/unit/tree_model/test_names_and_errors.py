"""Tests for display-name helpers and scan error classification."""

from __future__ import annotations

import errno
import unittest
from pathlib import Path

from dutop.tree_model import ErrorKind, ScanError, classify_os_error, full_name, short_name


class DisplayNameTests(unittest.TestCase):
    def test_short_name_uses_basename_with_directory_suffix(self) -> None:
        self.assertEqual(short_name(Path("/var/log"), True), "log/")
        self.assertEqual(short_name("/var/log/", True), "log/")
        self.assertEqual(short_name("/var/log/syslog", False), "syslog")

    def test_short_name_keeps_dot_paths(self) -> None:
        self.assertEqual(short_name(".", True), "./")
        self.assertEqual(short_name("..", True), "../")
        self.assertEqual(short_name("./.cache", True), ".cache/")

    def test_short_name_of_filesystem_root(self) -> None:
        self.assertEqual(short_name("/", True), "/")

    def test_full_name_keeps_entire_path(self) -> None:
        self.assertEqual(full_name("some/nested/dir", True), "some/nested/dir/")
        self.assertEqual(full_name("some/nested/dir//", True), "some/nested/dir/")
        self.assertEqual(full_name("some/file.txt", False), "some/file.txt")
        self.assertEqual(full_name(".", True), "./")
        self.assertEqual(full_name("/", True), "/")


class ErrorClassificationTests(unittest.TestCase):
    def test_builtin_os_errors_map_to_kinds(self) -> None:
        cases = [
            (FileNotFoundError(errno.ENOENT, "missing"), ErrorKind.NOT_FOUND, "File not found"),
            (PermissionError(errno.EACCES, "denied"), ErrorKind.PERMISSION_DENIED, "Permission denied"),
            (TimeoutError(errno.ETIMEDOUT, "slow"), ErrorKind.TIMED_OUT, "Timed out"),
            (InterruptedError(errno.EINTR, "signal"), ErrorKind.INTERRUPTED, "Interrupted"),
            (OSError(errno.EIO, "io"), ErrorKind.UNRECOGNIZED, "Unrecognized error"),
        ]
        for exc, kind, description in cases:
            with self.subTest(kind=kind):
                self.assertEqual(classify_os_error(exc), kind)
                self.assertEqual(kind.description, description)

    def test_errno_is_enough_to_classify(self) -> None:
        # OSError picks the matching subclass from errno on construction.
        self.assertEqual(classify_os_error(OSError(errno.ENOENT, "missing")), ErrorKind.NOT_FOUND)
        self.assertEqual(classify_os_error(OSError(errno.EPERM, "nope")), ErrorKind.PERMISSION_DENIED)

    def test_scan_error_carries_path_and_description(self) -> None:
        error = ScanError.from_os_error(PermissionError(errno.EACCES, "denied"), Path("/secret"))
        self.assertEqual(error.kind, ErrorKind.PERMISSION_DENIED)
        self.assertEqual(error.path, Path("/secret"))
        self.assertEqual(str(error), "Permission denied")


if __name__ == "__main__":
    unittest.main()
