"""
Preference keys and application identity.

`PreferenceKey` lists every preference the application ships. Its values are
the ids written to the settings store, so they are part of the on-disk
format. Public preference APIs also take plain strings, which lets callers
read and write keys outside this list.
"""

from enum import Enum
from typing import Union

# --- Application identity (locates the platform settings store) ---
ORGANIZATION_NAME = 'TermPrefs'
APPLICATION_NAME = 'TermPrefs'

# Overrides the native store with an INI file at this path when set.
SETTINGS_FILE_ENV_VAR = 'TERMPREFS_SETTINGS_FILE'


class PreferenceKey(str, Enum):
    """Shipped preferences, valued by their stored id.

    Several ids keep a historical name after the preference was renamed.
    An id is persisted user data: never change one after it has shipped.
    """
    OPEN_BOOKMARK = 'OpenBookmark'
    OPEN_ARRANGEMENT_AT_STARTUP = 'OpenArrangementAtStartup'
    QUIT_WHEN_ALL_WINDOWS_CLOSED = 'QuitWhenAllWindowsClosed'
    CONFIRM_CLOSING_MULTIPLE_TABS = 'OnlyWhenMoreTabs'  # predates split panes
    PROMPT_ON_QUIT = 'PromptOnQuit'
    INSTANT_REPLAY_MEMORY_MEGABYTES = 'IRMemory'
    SAVE_PASTE_AND_COMMAND_HISTORY = 'SavePasteHistory'  # predates command history
    ADD_BONJOUR_HOSTS_TO_PROFILES = 'EnableRendezvous'  # predates the name Bonjour
    CHECK_FOR_UPDATES_AUTOMATICALLY = 'SUEnableAutomaticChecks'  # owned by the updater
    CHECK_FOR_TEST_RELEASES = 'CheckTestRelease'
    LOAD_PREFS_FROM_CUSTOM_FOLDER = 'LoadPrefsFromCustomFolder'
    CUSTOM_FOLDER = 'PrefsCustomFolder'
    SELECTION_COPIES_TEXT = 'CopySelection'
    COPY_LAST_NEWLINE = 'CopyLastNewline'


PreferenceKeyLike = Union[PreferenceKey, str]


def preference_key_to_str(key: PreferenceKeyLike) -> str:
    """Stored id for key; strings that aren't shipped keys pass through unchanged."""
    if isinstance(key, PreferenceKey):
        return key.value
    return str(key)
