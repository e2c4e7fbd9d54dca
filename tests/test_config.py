"""Unit tests for BuildConfig."""

import unittest

from paramtreelib import BuildConfig


class TestBuildConfig(unittest.TestCase):

    def test_defaults_valid(self):
        self.assertEqual(BuildConfig().validate(), [])

    def test_presets(self):
        self.assertFalse(BuildConfig.strict().search_ancestors)
        permissive = BuildConfig.permissive()
        self.assertGreater(permissive.max_items_per_level, BuildConfig().max_items_per_level)
        self.assertEqual(permissive.validate(), [])

    def test_invalid_values(self):
        config = BuildConfig(separator="", max_items_per_level=-1, max_depth=0, root_key="")
        errors = config.validate()

        self.assertIn("separator cannot be empty", errors)
        self.assertIn("max_items_per_level must be positive", errors)
        self.assertIn("max_depth must be positive", errors)
        self.assertIn("root_key cannot be empty", errors)

    def test_separator_must_be_a_qualifier(self):
        errors = BuildConfig(separator="/").validate()
        self.assertIn("separator must be one of the qualifier tokens", errors)

    def test_root_key_cannot_hold_separator(self):
        errors = BuildConfig(root_key="my.root").validate()
        self.assertIn("root_key cannot contain a qualifier token", errors)

    def test_split_name(self):
        config = BuildConfig()
        self.assertEqual(config.split_name("cutoff"), ["cutoff"])
        self.assertEqual(config.split_name("env.attack"), ["env", "attack"])
        self.assertEqual(config.split_name("env::attack"), ["env", "attack"])
        self.assertEqual(config.split_name("a::b.c"), ["a", "b", "c"])
        self.assertEqual(config.split_name(""), [])

    def test_split_with_custom_separator(self):
        config = BuildConfig(separator="::")
        self.assertEqual(config.split_name("env.attack"), ["env", "attack"])


if __name__ == '__main__':
    unittest.main()
