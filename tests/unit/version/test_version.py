"""
Tests for `orderedmap.version`.
"""

import unittest

from orderedmap.version import (
    BETA_VERSION_OFFSET,
    VERSION,
    VERSION_STRING,
    _version_string,
)


class TestVersionModule(unittest.TestCase):
    """
    Tests for the `orderedmap.version` module.
    """

    def test_version_string(self):
        """
        Test that the version string is generated from the version tuple.
        """
        self.assertEqual(
            ".".join(str(component) for component in VERSION),
            VERSION_STRING)
        self.assertEqual("1.2.3", _version_string((1, 2, 3)))
        # A negative last component marks a beta version.
        self.assertEqual(
            "1.0b1", _version_string((1, 0, 1 + BETA_VERSION_OFFSET)))
        self.assertEqual(
            "2.1b3", _version_string((2, 1, 3 + BETA_VERSION_OFFSET)))
