import pytest

from stackviz.core.history import HistoryLog


def test_history_evicts_oldest_when_full() -> None:
    log = HistoryLog()
    for i in range(12):
        log.append(f"Pushed: {i}")
    assert len(log) == 10
    assert log.entries[0] == "Pushed: 2"
    assert log.entries[-1] == "Pushed: 11"


def test_history_clear() -> None:
    log = HistoryLog(max_size=3)
    log.append("Pushed: a")
    log.clear()
    assert log.entries == ()
    assert log.max_size == 3


def test_history_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        HistoryLog(max_size=0)
