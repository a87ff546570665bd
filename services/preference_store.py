# services/preference_store.py
# Persistent key-value store backing the preferences facade.

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Optional

from PyQt6.QtCore import QSettings

from utils.constants import APPLICATION_NAME, ORGANIZATION_NAME, SETTINGS_FILE_ENV_VAR

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

# Group recording the Python type each value was written with.
VALUE_TYPES_GROUP = '__value_types__'

_TYPES_BY_NAME = {'bool': bool, 'int': int, 'str': str}


class PreferenceStore(ABC):
    """
    Platform key-value store holding raw bool, int and str values by
    string key. Values are durable once a write returns.
    """

    @abstractmethod
    def get(self, key: str, value_type: Optional[type] = None) -> Any:
        """
        Returns the stored value for key, or None when nothing is stored.

        Args:
            key (str): The string id of the preference.
            value_type: The Python type the caller expects, if known. Stores
                that keep values as text may use it to convert on read.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        raise NotImplementedError


class QSettingsPreferenceStore(PreferenceStore):
    """
    PreferenceStore backed by QSettings (native format or an INI file).

    INI files keep only text, so every write also records the value's type
    and reads convert back to it. Values without a recorded type are
    converted to the caller's value_type when Qt can, else returned as stored.
    """

    def __init__(self, settings: QSettings):
        self._settings = settings

    def get(self, key: str, value_type: Optional[type] = None) -> Any:
        if not self._settings.contains(key):
            return None
        written_type = _TYPES_BY_NAME.get(self._settings.value(self._type_key(key)))
        if written_type is not None:
            value_type = written_type
        if value_type is None:
            return self._settings.value(key)
        try:
            return self._settings.value(key, type=value_type)
        except TypeError:
            logger.debug("Preference %s is not a %s; reading it untyped", key, value_type.__name__)
            return self._settings.value(key)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)
        self._settings.setValue(self._type_key(key), type(value).__name__)
        self._sync()
        logger.debug("Stored preference %s=%r", key, value)

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.remove(self._type_key(key))
        self._sync()
        logger.debug("Removed preference %s", key)

    @staticmethod
    def _type_key(key: str) -> str:
        return f"{VALUE_TYPES_GROUP}/{key}"

    def _sync(self):
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            logger.warning("Could not sync preferences to %s: %s",
                           self._settings.fileName(), self._settings.status())


def create_default_store() -> QSettingsPreferenceStore:
    """
    Creates the application's store.

    Uses an INI file when the settings-file environment variable is set,
    otherwise the platform's native settings location.
    """
    file_path = os.environ.get(SETTINGS_FILE_ENV_VAR)
    if file_path:
        logger.info("Using preferences file from %s: %s", SETTINGS_FILE_ENV_VAR, file_path)
        settings = QSettings(file_path, QSettings.Format.IniFormat)
    else:
        settings = QSettings(ORGANIZATION_NAME, APPLICATION_NAME)
    return QSettingsPreferenceStore(settings)
