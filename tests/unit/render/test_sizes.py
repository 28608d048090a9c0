"""Tests for human-readable size formatting."""

from __future__ import annotations

import unittest

from dutop.render import format_size


class FormatSizeTests(unittest.TestCase):
    def test_literal_cases(self) -> None:
        cases = {
            1: "1 B",
            345: "345 B",
            1000: "1.00 kB",
            1100: "1.10 kB",
            11000: "11.00 kB",
            123456789: "123.46 MB",
            123452000: "123.45 MB",
            867000000000: "867.00 GB",
            867000000000000: "867000.00 GB",
        }
        for byte_count, expected in cases.items():
            with self.subTest(byte_count=byte_count):
                self.assertEqual(format_size(byte_count), expected)

    def test_unit_boundaries_are_inclusive_at_the_top(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(599), "599 B")
        self.assertEqual(format_size(600), "0.60 kB")
        self.assertEqual(format_size(1_400_000), "1400.00 kB")
        self.assertEqual(format_size(1_400_001), "1.40 MB")
        self.assertEqual(format_size(1_400_000_000), "1400.00 MB")
        self.assertEqual(format_size(1_400_000_001), "1.40 GB")


if __name__ == "__main__":
    unittest.main()
