from services.computed_values import WindowArrangementSource
from services.preference_store import PreferenceStore


class InMemoryStore(PreferenceStore):
    """Dict-backed store that keeps values with their Python types."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.reads = []

    def get(self, key, value_type=None):
        self.reads.append(key)
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value

    def remove(self, key):
        self.values.pop(key, None)


class FixedArrangements(WindowArrangementSource):
    def __init__(self, count=0):
        self.saved = count

    def count(self):
        return self.saved
