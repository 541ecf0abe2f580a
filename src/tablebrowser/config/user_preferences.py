"""
User Preferences - Read-only access to persisted user settings

The browser only ever reads one value from here (rows per page);
writing preferences belongs to the host application.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..constants import DEFAULT_ROWS_PER_PAGE, PREF_KEY_ROWS_PER_PAGE
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class UserPreferences:
    """
    Read-only view over a JSON preferences file.

    Preferences include:
    - rows_per_page: Number of data rows per table page
    """

    DEFAULT_PREFERENCES = {
        PREF_KEY_ROWS_PER_PAGE: DEFAULT_ROWS_PER_PAGE,
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize user preferences.

        Args:
            config_file: Path to the JSON preferences file (None = defaults only)
        """
        self._preferences: Dict[str, Any] = self.DEFAULT_PREFERENCES.copy()
        self._config_file = Path(config_file) if config_file else None

        self.load()

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "UserPreferences":
        """Build preferences from in-memory values (merged over defaults)."""
        prefs = cls()
        prefs._preferences.update(values)
        return prefs

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a preference value

        Args:
            key: Preference key
            default: Default value if key not found

        Returns:
            Preference value or default
        """
        return self._preferences.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """Get all preferences as a dictionary"""
        return self._preferences.copy()

    def load(self):
        """Load preferences from file"""
        if self._config_file is None:
            return

        if not self._config_file.exists():
            logger.info(f"No preferences file at {self._config_file}, using defaults")
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                loaded_prefs = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Cannot read preferences file {self._config_file}: {e}"
            ) from e

        if not isinstance(loaded_prefs, dict):
            raise ConfigurationError(
                f"Preferences file {self._config_file} must contain a JSON object"
            )

        # Merge with defaults to ensure all keys exist
        self._preferences = self.DEFAULT_PREFERENCES.copy()
        self._preferences.update(loaded_prefs)
        logger.info(f"Loaded preferences from {self._config_file}")


def get_rows_per_page(preferences: Optional[UserPreferences] = None) -> int:
    """
    Read the rows-per-page setting.

    Accepts an int or a numeric string (the host may store every
    preference as text).

    Args:
        preferences: Preference store (None = built-in default)

    Returns:
        Positive number of rows per page

    Raises:
        ConfigurationError: If the stored value is not a positive integer
    """
    if preferences is None:
        return DEFAULT_ROWS_PER_PAGE

    value = preferences.get(PREF_KEY_ROWS_PER_PAGE)
    if value is None:
        return DEFAULT_ROWS_PER_PAGE

    # bool is an int subclass: reject it explicitly
    if isinstance(value, bool):
        rows_per_page = None
    elif isinstance(value, int):
        rows_per_page = value
    elif isinstance(value, str):
        try:
            rows_per_page = int(value.strip())
        except ValueError:
            rows_per_page = None
    else:
        rows_per_page = None

    if rows_per_page is None or rows_per_page < 1:
        raise ConfigurationError(
            f"Invalid '{PREF_KEY_ROWS_PER_PAGE}' preference: {value!r} "
            f"(expected a positive integer)",
            key=PREF_KEY_ROWS_PER_PAGE,
            value=value,
        )

    return rows_per_page
