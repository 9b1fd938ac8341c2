"""
Tests for the ErrorWithContext model.
"""

import unittest

import pytest

from ..helper.location import Location
from .error_with_context import ErrorWithContext


class EmptyError(Exception):
    pass


class TestErrorWithContext(unittest.TestCase):
    """Test cases for ErrorWithContext."""

    def test_str(self):
        """Test rendering with and without message and wrapped error."""
        base_err = ValueError("base error")
        location = Location("test.py", 42, "tests.test_func")

        test_cases = [
            {
                "name": "with wrapped error",
                "err": ErrorWithContext("context message", base_err, location),
                "expected": "context message [test.py:42 tests.test_func]: base error",
            },
            {
                "name": "without wrapped error",
                "err": ErrorWithContext("standalone message", None, location),
                "expected": "standalone message [test.py:42 tests.test_func]",
            },
            {
                "name": "empty message with wrapped error",
                "err": ErrorWithContext("", base_err, location),
                "expected": "[test.py:42 tests.test_func]: base error",
            },
            {
                "name": "empty message without wrapped error",
                "err": ErrorWithContext("", None, location),
                "expected": "[test.py:42 tests.test_func]",
            },
            {
                "name": "unknown location",
                "err": ErrorWithContext("lost", base_err),
                "expected": "lost [unknown location]: base error",
            },
            {
                "name": "wrapped error without text",
                "err": ErrorWithContext("", EmptyError(), location),
                "expected": "[test.py:42 tests.test_func]: EmptyError",
            },
            {
                "name": "nested errors",
                "err": ErrorWithContext(
                    "outer",
                    ErrorWithContext("inner", base_err, Location("a.py", 1, "a.f")),
                    Location("b.py", 2, "b.g"),
                ),
                "expected": "outer [b.py:2 b.g]: inner [a.py:1 a.f]: base error",
            },
        ]

        for test_case in test_cases:
            with self.subTest(test_case["name"]):
                err = test_case["err"]
                self.assertEqual(str(err), test_case["expected"])
                # Rendering does not change the error
                self.assertEqual(str(err), test_case["expected"])

    def test_fields(self):
        """Test that all fields are exposed."""
        base_err = KeyError("id")
        location = Location("service.py", 10, "service.handle")
        err = ErrorWithContext("lookup failed", base_err, location)

        self.assertEqual(err.message, "lookup failed")
        self.assertIs(err.wrapped, base_err)
        self.assertIs(err.unwrap(), base_err)
        self.assertIs(err.__cause__, base_err)
        self.assertEqual(err.location, location)
        self.assertEqual(err.file, "service.py")
        self.assertEqual(err.line, 10)
        self.assertEqual(err.func_name, "service.handle")
        self.assertEqual(err.args, ("lookup failed",))

    def test_defaults(self):
        """Test an error constructed without arguments."""
        err = ErrorWithContext()

        self.assertEqual(err.message, "")
        self.assertIsNone(err.unwrap())
        self.assertFalse(err.location.is_known())
        self.assertEqual(str(err), "[unknown location]")

    def test_read_only(self):
        """Test that fields cannot be reassigned."""
        err = ErrorWithContext("message", ValueError("base"))

        for field in ("message", "wrapped", "location", "file", "line", "func_name"):
            with self.subTest(field):
                with self.assertRaises(AttributeError):
                    setattr(err, field, None)

    def test_wrapped_must_be_exception(self):
        """Test that a non-exception cannot be wrapped."""
        with pytest.raises(TypeError, match="wrapped error must be an exception"):
            ErrorWithContext("message", "base")  # type: ignore[arg-type]

    def test_repr(self):
        """Test the repr of an error."""
        err = ErrorWithContext("message", None, Location("x.py", 3, "x.f"))

        self.assertEqual(
            repr(err),
            "ErrorWithContext(message='message', wrapped=None, "
            "location=Location(file='x.py', line=3, func_name='x.f'))",
        )


if __name__ == "__main__":
    unittest.main()
