"""
Tests for call site resolution.
"""

import inspect
import threading
import unittest
from typing import List

import pytest

from .location import Location, get_caller_info, get_caller_location


class TestGetCallerInfo(unittest.TestCase):
    """Test cases for get_caller_info."""

    def test_get_caller_info(self):
        """Test resolving the calling function."""
        file, line, func_name = get_caller_info(0)
        expected_line = inspect.currentframe().f_lineno - 1

        self.assertTrue(file.endswith(".py"))
        self.assertEqual(line, expected_line)
        self.assertIn("test_get_caller_info", func_name)
        self.assertTrue(func_name.startswith(__name__))

    def test_skip_moves_outwards(self):
        """Test that skip 1 reports the caller of the calling function."""

        def resolve_one_up():
            return get_caller_info(1)

        _, _, func_name = resolve_one_up()
        self.assertEqual(
            func_name, f"{__name__}.TestGetCallerInfo.test_skip_moves_outwards"
        )
        self.assertNotIn("<locals>", func_name)
        self.assertNotIn("resolve_one_up", func_name)

    def test_skip_beyond_stack(self):
        """Test that an invalid skip returns empty values instead of raising."""
        file, line, func_name = get_caller_info(9999)

        self.assertEqual(file, "")
        self.assertEqual(line, 0)
        self.assertEqual(func_name, "")

    def test_negative_skip(self):
        """Test that a negative skip is rejected."""
        with pytest.raises(ValueError, match="skip must not be negative"):
            get_caller_info(-1)

    def test_threads_see_own_stack(self):
        """Test that every thread resolves its own call site."""
        results: List[str] = []
        lock = threading.Lock()

        def resolve_in_thread():
            _, _, func_name = get_caller_info(0)
            with lock:
                results.append(func_name)

        threads = [threading.Thread(target=resolve_in_thread) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 10)
        for func_name in results:
            self.assertIn("resolve_in_thread", func_name)


class TestLocation(unittest.TestCase):
    """Test cases for Location."""

    def test_get_caller_location(self):
        """Test resolving a Location for the calling function."""
        location = get_caller_location()

        self.assertTrue(location.is_known())
        self.assertTrue(location.file.endswith(".py"))
        self.assertIn("test_get_caller_location", location.func_name)

    def test_get_caller_location_beyond_stack(self):
        """Test that an invalid skip gives an unknown Location."""
        location = get_caller_location(9999)

        self.assertEqual(location, Location())
        self.assertFalse(location.is_known())

    def test_str(self):
        """Test Location string representation."""
        test_cases = [
            {
                "name": "known location",
                "location": Location("app.py", 42, "app.main"),
                "expected": "app.py:42 app.main",
            },
            {
                "name": "unknown location",
                "location": Location(),
                "expected": "unknown location",
            },
        ]

        for test_case in test_cases:
            with self.subTest(test_case["name"]):
                self.assertEqual(str(test_case["location"]), test_case["expected"])

    def test_frozen(self):
        """Test that a Location cannot be changed."""
        location = Location("app.py", 42, "app.main")
        with self.assertRaises(AttributeError):
            location.line = 43  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
