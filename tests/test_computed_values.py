from fakes import FixedArrangements, InMemoryStore
from services.computed_values import CustomFolderProvider, OpenArrangementAtStartupProvider
from services.preference_values import ABSENT, BoolValue, StrValue
from utils.constants import PreferenceKey, preference_key_to_str


def test_open_arrangement_provider():
    arrangements = FixedArrangements(count=0)
    provider = OpenArrangementAtStartupProvider(arrangements)
    assert provider.compute() == BoolValue(False)
    arrangements.saved = 2
    assert provider.compute() is ABSENT


def test_custom_folder_provider_reads_store_directly():
    store = InMemoryStore()
    provider = CustomFolderProvider(store)
    assert provider.compute() == StrValue("")
    store.values["PrefsCustomFolder"] = "/opt/prefs"
    assert provider.compute() == StrValue("/opt/prefs")
    assert store.reads == ["PrefsCustomFolder", "PrefsCustomFolder"]


def test_preference_key_helpers():
    assert preference_key_to_str(PreferenceKey.CONFIRM_CLOSING_MULTIPLE_TABS) == "OnlyWhenMoreTabs"
    assert preference_key_to_str("Anything") == "Anything"


def test_custom_folder_provider_returns_text_for_other_kinds():
    store = InMemoryStore({"PrefsCustomFolder": 7})
    assert CustomFolderProvider(store).compute() == StrValue("7")
