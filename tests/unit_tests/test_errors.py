"""
Unit tests for structured validation errors.
"""

import unittest

from errors import InvalidConfigError, ValidationFailure
from validators import validate_runtime_options


class TestValidationFailure(unittest.TestCase):
    """Test ValidationFailure messages and serialisation."""

    def test_message_without_allowed(self):
        failure = ValidationFailure("RuntimeOptions.timeout_seconds", "must be a number", "60")
        self.assertEqual(failure.message, "RuntimeOptions.timeout_seconds must be a number.")

    def test_message_with_allowed(self):
        failure = ValidationFailure("RuntimeOptions.memory", "must be one of", "3GB", ("1GB", "2GB"))
        self.assertEqual(failure.message, "RuntimeOptions.memory must be one of: 1GB, 2GB.")
        self.assertEqual(failure.to_dict()["allowed"], ["1GB", "2GB"])


class TestInvalidConfigError(unittest.TestCase):
    """Test InvalidConfigError."""

    def test_is_value_error(self):
        self.assertTrue(issubclass(InvalidConfigError, ValueError))

    def test_to_dict_lists_failures(self):
        with self.assertRaises(InvalidConfigError) as ctx:
            validate_runtime_options({"memory": "3GB", "timeout_seconds": "60"})
        data = ctx.exception.to_dict()
        self.assertEqual(data["error"], "InvalidConfigError")
        self.assertEqual(
            [f["field"] for f in data["failures"]],
            ["RuntimeOptions.memory", "RuntimeOptions.timeout_seconds"],
        )
        self.assertEqual(data["failures"][0]["value"], "3GB")

    def test_single(self):
        error = InvalidConfigError.single("topic", "may not contain a /", "a/b")
        self.assertEqual(str(error), "topic may not contain a /.")
        self.assertEqual(len(error.failures), 1)


if __name__ == "__main__":
    unittest.main()
