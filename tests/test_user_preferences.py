"""
Unit tests for the read-only preferences and the rows-per-page setting.
"""
import pytest

from tablebrowser.config.user_preferences import UserPreferences, get_rows_per_page
from tablebrowser.errors import ConfigurationError


class TestUserPreferences:

    def test_missing_file_uses_defaults(self, tmp_path):
        prefs = UserPreferences(tmp_path / "nope.json")
        assert prefs.get("rows_per_page") == 10
        # Read-only: nothing is written
        assert not (tmp_path / "nope.json").exists()

    def test_no_file(self):
        prefs = UserPreferences()
        assert prefs.get_all() == {"rows_per_page": 10}

    def test_loads_and_merges(self, prefs_file):
        prefs = UserPreferences(prefs_file({"rows_per_page": 25, "theme": "dark"}))
        assert prefs.get("rows_per_page") == 25
        assert prefs.get("theme") == "dark"
        assert prefs.get("missing", "x") == "x"

    def test_invalid_json(self, prefs_file):
        with pytest.raises(ConfigurationError):
            UserPreferences(prefs_file("{not json"))

    def test_non_object_json(self, prefs_file):
        with pytest.raises(ConfigurationError):
            UserPreferences(prefs_file([1, 2, 3]))


class TestRowsPerPage:

    def test_default_without_preferences(self):
        assert get_rows_per_page(None) == 10

    def test_default_when_unset(self):
        assert get_rows_per_page(UserPreferences.from_dict({"rows_per_page": None})) == 10

    @pytest.mark.parametrize("value,expected", [(1, 1), (50, 50), ("20", 20), (" 7 ", 7)])
    def test_valid_values(self, value, expected):
        prefs = UserPreferences.from_dict({"rows_per_page": value})
        assert get_rows_per_page(prefs) == expected

    @pytest.mark.parametrize("value", [0, -1, "0", "abc", "", 2.5, True, [10]])
    def test_invalid_values(self, value):
        prefs = UserPreferences.from_dict({"rows_per_page": value})
        with pytest.raises(ConfigurationError) as exc_info:
            get_rows_per_page(prefs)
        assert exc_info.value.key == "rows_per_page"
        assert exc_info.value.value == value
