from services.preference_observers import PreferenceObserverRegistry
from services.preference_values import ABSENT, IntValue


def test_registration_order_and_no_dedup():
    registry = PreferenceObserverRegistry()
    calls = []

    def observer(before, after):
        calls.append(after)

    registry.add("IRMemory", observer)
    registry.add("IRMemory", observer)
    assert registry.has_observers("IRMemory")
    assert not registry.has_observers("PromptOnQuit")
    assert registry.notify("IRMemory", ABSENT, IntValue(5)) == 2
    assert calls == [IntValue(5), IntValue(5)]


def test_failure_is_logged_and_dispatch_continues(caplog):
    registry = PreferenceObserverRegistry()
    calls = []

    def failing(before, after):
        raise ValueError("notify fail")

    registry.add("IRMemory", failing)
    registry.add("IRMemory", lambda b, a: calls.append((b, a)))
    with caplog.at_level("ERROR"):
        completed = registry.notify("IRMemory", IntValue(4), IntValue(8))
    assert completed == 1
    assert calls == [(IntValue(4), IntValue(8))]
    assert "notify fail" in caplog.text


def test_observers_for_returns_copy():
    registry = PreferenceObserverRegistry()
    registry.add("IRMemory", print)
    registry.observers_for("IRMemory").clear()
    assert registry.has_observers("IRMemory")
