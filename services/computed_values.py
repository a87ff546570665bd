"""
services/computed_values.py

Providers that derive a preference's effective value from live application
state. A provider returning ``ABSENT`` defers to the stored value or the
default; any other value overrides both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from services.preference_store import PreferenceStore
from services.preference_values import ABSENT, BoolValue, PreferenceValue, StrValue, to_str, wrap
from utils.constants import PreferenceKey


class WindowArrangementSource(ABC):
    """Registry of saved window arrangements."""

    @abstractmethod
    def count(self) -> int:
        """Number of saved arrangements."""
        raise NotImplementedError


class ComputedValueProvider(ABC):
    """Computes a preference value on every read; results are never cached."""

    @abstractmethod
    def compute(self) -> PreferenceValue:
        raise NotImplementedError


class OpenArrangementAtStartupProvider(ComputedValueProvider):
    """Reports the preference as off while there is no arrangement to open."""

    def __init__(self, arrangements: WindowArrangementSource):
        self._arrangements = arrangements

    def compute(self) -> PreferenceValue:
        if self._arrangements.count() == 0:
            return BoolValue(False)
        return ABSENT


class CustomFolderProvider(ComputedValueProvider):
    """
    Returns the stored custom folder, or an empty string when unset.

    Reads the store directly instead of going through the facade's get,
    which would call back into this provider. Text fields can't display None.
    """

    def __init__(self, store: PreferenceStore):
        self._store = store

    def compute(self) -> PreferenceValue:
        folder = wrap(self._store.get(PreferenceKey.CUSTOM_FOLDER.value, str))
        return StrValue(to_str(folder) or "")
