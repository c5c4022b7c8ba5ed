"""
Test suite for configuration sources.
Tests path resolution in DictConfigurationSource and the typed try-gets of the base class.
"""

import unittest

import pytest

from appconfig.config import ConfigurationSource, DictConfigurationSource
from appconfig.core.enums import ValueKind
from appconfig.core.exceptions import ConfigurationTypeError

pytestmark = pytest.mark.unit



class TestDictConfigurationSource(unittest.TestCase):
    """Path resolution over nested mappings."""

    def setUp(self):
        self.data = {
            "app": {
                "name": "billing",
                "debug": False,
                "limits": {"rate": 2.5},
            },
            "db.host": "localhost",
            "servers": [{"host": "a"}, {"host": "b"}],
            "empty": None,
        }
        self.source = DictConfigurationSource(self.data)

    def test_nested_path(self):
        self.assertEqual(self.source.try_get_value("app.name"), ("billing", True))
        self.assertEqual(self.source.try_get_value("app.limits.rate"), (2.5, True))

    def test_flat_dotted_key(self):
        self.assertEqual(self.source.try_get_value("db.host"), ("localhost", True))

    def test_section_is_returned_whole(self):
        value, found = self.source.try_get_value("app.limits")
        self.assertTrue(found)
        self.assertEqual(value, {"rate": 2.5})

    def test_list_index_segments(self):
        self.assertEqual(self.source.try_get_value("servers.1.host"), ("b", True))
        self.assertEqual(self.source.try_get_value("servers.0"), ({"host": "a"}, True))
        self.assertEqual(self.source.try_get_value("servers.5.host"), (None, False))
        self.assertEqual(self.source.try_get_value("servers.first"), (None, False))
        self.assertEqual(self.source.try_get_value("servers.-1"), (None, False))
        self.assertEqual(self.source.try_get_value("servers. 1"), (None, False))

    def test_missing_paths(self):
        for path in ["", "app.version", "nope", "app.name.first", "db.port"]:
            with self.subTest(path=path):
                self.assertEqual(self.source.try_get_value(path), (None, False))

    def test_stored_none_is_found(self):
        self.assertEqual(self.source.try_get_value("empty"), (None, True))

    def test_data_is_copied_on_construction(self):
        self.data["app"]["name"] = "changed"
        self.assertEqual(self.source.try_get_string("app.name"), ("billing", True))

    def test_custom_delimiter(self):
        source = DictConfigurationSource({"app": {"name": "billing"}}, path_delimiter=":")

        self.assertEqual(source.try_get_string("app:name"), ("billing", True))
        self.assertEqual(source.try_get_string("app.name"), (None, False))

    def test_empty_delimiter_rejected(self):
        with self.assertRaises(ValueError):
            DictConfigurationSource({}, path_delimiter="")

    def test_no_data(self):
        self.assertEqual(DictConfigurationSource().try_get_value("a"), (None, False))

    def test_typed_try_gets(self):
        self.assertEqual(self.source.try_get_bool("app.debug"), (False, True))
        self.assertEqual(self.source.try_get_float("app.limits.rate"), (2.5, True))
        self.assertEqual(self.source.try_get_array("servers"), ([{"host": "a"}, {"host": "b"}], True))
        self.assertEqual(self.source.try_get_int("nope"), (None, False))

    def test_typed_try_get_mismatch(self):
        with self.assertRaises(ConfigurationTypeError):
            self.source.try_get_int("app.name")
        with self.assertRaises(ConfigurationTypeError):
            self.source.try_get_string("empty")

    def test_try_get_object_calls_factory(self):
        value, found = self.source.try_get_object("app.limits", lambda raw: raw["rate"] * 2)
        self.assertTrue(found)
        self.assertEqual(value, 5.0)


class UpperCaseSource(ConfigurationSource):
    """Source that overrides one typed getter."""
    def try_get_value(self, path):
        return path, True

    def try_get_string(self, path):
        return path.upper(), True


class TestConfigurationSourceBase(unittest.TestCase):
    """Behaviour shared by every source."""

    def test_cannot_instantiate_without_try_get_value(self):
        with self.assertRaises(TypeError):
            ConfigurationSource()

    def test_dispatch_honours_overrides(self):
        source = UpperCaseSource()

        self.assertEqual(source.try_get("db.host", ValueKind.STRING), ("DB.HOST", True))
        self.assertEqual(source.try_get("db.host", ValueKind.VALUE), ("db.host", True))

    def test_dispatch_object_uses_factory(self):
        source = UpperCaseSource()
        self.assertEqual(source.try_get("x", ValueKind.OBJECT, lambda raw: [raw]), (["x"], True))


if __name__ == "__main__":
    unittest.main()
