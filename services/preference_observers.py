# services/preference_observers.py
# Registry of per-key change callbacks owned by a preferences service.

import logging
from typing import Callable, Dict, List

from services.preference_values import PreferenceValue

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

PreferenceObserver = Callable[[PreferenceValue, PreferenceValue], None]


class PreferenceObserverRegistry:
    """
    Ordered callbacks keyed by preference string id.

    Registrations only accumulate: there is no dedup and no way to remove
    an observer.
    """

    def __init__(self):
        self._observers: Dict[str, List[PreferenceObserver]] = {}

    def add(self, key: str, callback: PreferenceObserver):
        self._observers.setdefault(key, []).append(callback)

    def has_observers(self, key: str) -> bool:
        return bool(self._observers.get(key))

    def observers_for(self, key: str) -> List[PreferenceObserver]:
        """Returns a copy of the callbacks for key, in registration order."""
        return list(self._observers.get(key, ()))

    def notify(self, key: str, before: PreferenceValue, after: PreferenceValue) -> int:
        """
        Calls every observer of key with (before, after), in registration order.

        A failing observer is logged and does not stop the remaining ones.
        Returns the number of observers that completed without raising.
        """
        completed = 0
        for callback in self.observers_for(key):
            try:
                callback(before, after)
            except Exception as e:
                logger.exception("Preference observer for %s failed: %s", key, e)
                continue
            completed += 1
        return completed
