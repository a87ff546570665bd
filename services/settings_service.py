# services/settings_service.py
# Typed access to the application's preferences, with defaults,
# computed overrides and change notification.

import logging
from typing import Dict, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from services.computed_values import (
    ComputedValueProvider,
    CustomFolderProvider,
    OpenArrangementAtStartupProvider,
    WindowArrangementSource,
)
from services.preference_observers import PreferenceObserver, PreferenceObserverRegistry
from services.preference_store import PreferenceStore, create_default_store
from services.preference_values import (
    ABSENT,
    BoolValue,
    IntValue,
    PreferenceValue,
    StrValue,
    to_bool,
    to_int,
    to_str,
    wrap,
)
from utils.constants import PreferenceKey, PreferenceKeyLike, preference_key_to_str

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DEFAULT_VALUES: Dict[str, PreferenceValue] = {
    PreferenceKey.OPEN_BOOKMARK.value: BoolValue(False),
    PreferenceKey.OPEN_ARRANGEMENT_AT_STARTUP.value: BoolValue(False),
    PreferenceKey.QUIT_WHEN_ALL_WINDOWS_CLOSED.value: BoolValue(False),
    PreferenceKey.CONFIRM_CLOSING_MULTIPLE_TABS.value: BoolValue(True),
    PreferenceKey.PROMPT_ON_QUIT.value: BoolValue(True),
    PreferenceKey.INSTANT_REPLAY_MEMORY_MEGABYTES.value: IntValue(4),
    PreferenceKey.SAVE_PASTE_AND_COMMAND_HISTORY.value: BoolValue(False),
    PreferenceKey.ADD_BONJOUR_HOSTS_TO_PROFILES.value: BoolValue(False),
    PreferenceKey.CHECK_FOR_UPDATES_AUTOMATICALLY.value: BoolValue(True),
    PreferenceKey.CHECK_FOR_TEST_RELEASES.value: BoolValue(True),
    PreferenceKey.LOAD_PREFS_FROM_CUSTOM_FOLDER.value: BoolValue(False),
    PreferenceKey.CUSTOM_FOLDER.value: ABSENT,
    PreferenceKey.SELECTION_COPIES_TEXT.value: BoolValue(True),
    PreferenceKey.COPY_LAST_NEWLINE.value: BoolValue(False),
}

# Python type of each string-valued preference whose default is absent.
_ABSENT_DEFAULT_TYPES: Dict[str, type] = {
    PreferenceKey.CUSTOM_FOLDER.value: str,
}


class PreferencesService(QObject):
    """
    Reads and writes preferences in a PreferenceStore.

    A read tries the key's computed provider first, then the store, then
    DEFAULT_VALUES. A write notifies the key's observers, and then emits
    preference_changed, only when the effective value changed.
    """
    preference_changed = pyqtSignal(str, object, object)

    def __init__(
        self,
        store: PreferenceStore,
        computed: Optional[Dict[str, ComputedValueProvider]] = None,
        observers: Optional[PreferenceObserverRegistry] = None,
    ):
        super().__init__()
        self._store = store
        self._computed = {preference_key_to_str(k): v for k, v in (computed or {}).items()}
        self._observers = observers if observers is not None else PreferenceObserverRegistry()

    # --- Defaults ---
    def keys(self) -> List[str]:
        return list(DEFAULT_VALUES)

    def has_default(self, key: PreferenceKeyLike) -> bool:
        """True if key is shipped, even when its default is absent."""
        return preference_key_to_str(key) in DEFAULT_VALUES

    def default_value(self, key: PreferenceKeyLike) -> PreferenceValue:
        return DEFAULT_VALUES.get(preference_key_to_str(key), ABSENT)

    # --- Generic access ---
    def get(self, key: PreferenceKeyLike) -> PreferenceValue:
        """
        Returns the effective value for key.

        Unknown keys are not an error; they read as ABSENT.
        """
        key = preference_key_to_str(key)
        provider = self._computed.get(key)
        if provider is not None:
            computed = provider.compute()
            if computed != ABSENT:
                return computed

        stored = self._store.get(key, self._value_type(key))
        if stored is not None:
            return wrap(stored)

        return self.default_value(key)

    def set(self, key: PreferenceKeyLike, value: PreferenceValue):
        """
        Stores value under key, or removes the key when value is ABSENT.

        Observers of key are called with (before, after) unless the
        effective value before the write equals the new value.
        """
        key = preference_key_to_str(key)
        notify = self._observers.has_observers(key) or self._has_signal_receivers()
        before = ABSENT
        if notify:
            before = self.get(key)
            if before == value:
                notify = False

        if value == ABSENT:
            self._store.remove(key)
        else:
            self._store.set(key, value.value)

        if notify:
            logger.debug("Preference %s changed: %r -> %r", key, before, value)
            self._observers.notify(key, before, value)
            self.preference_changed.emit(key, before, value)

    def add_observer(self, key: PreferenceKeyLike, callback: PreferenceObserver):
        """
        Registers callback(before, after) for changes to key.

        Callbacks run synchronously inside set(), in registration order.
        """
        self._observers.add(preference_key_to_str(key), callback)

    # --- Typed access ---
    def get_bool(self, key: PreferenceKeyLike) -> bool:
        return to_bool(self.get(key))

    def set_bool(self, key: PreferenceKeyLike, value: bool):
        self.set(key, BoolValue(bool(value)))

    def get_int(self, key: PreferenceKeyLike) -> int:
        return to_int(self.get(key))

    def set_int(self, key: PreferenceKeyLike, value: int):
        self.set(key, IntValue(int(value)))

    def get_string(self, key: PreferenceKeyLike) -> Optional[str]:
        return to_str(self.get(key))

    def set_string(self, key: PreferenceKeyLike, value: Optional[str]):
        self.set(key, ABSENT if value is None else StrValue(value))

    def _has_signal_receivers(self) -> bool:
        return self.receivers(self.preference_changed) > 0

    def _value_type(self, key: str) -> Optional[type]:
        default = DEFAULT_VALUES.get(key)
        if default is None:
            return None
        return default.python_type or _ABSENT_DEFAULT_TYPES.get(key)


def create_preferences_service(
    arrangements: WindowArrangementSource,
    store: Optional[PreferenceStore] = None,
) -> PreferencesService:
    """
    Builds the application's PreferencesService with its computed providers.

    Create one at startup and pass it to whatever needs preferences.
    """
    store = store if store is not None else create_default_store()
    computed: Dict[str, ComputedValueProvider] = {
        PreferenceKey.OPEN_ARRANGEMENT_AT_STARTUP.value: OpenArrangementAtStartupProvider(arrangements),
        PreferenceKey.CUSTOM_FOLDER.value: CustomFolderProvider(store),
    }
    return PreferencesService(store, computed)
