from stackviz.core.models import StackError, TypedValue, ValueKind
from stackviz.core.stack import StackEngine


def test_push_locks_kind_and_rejects_other_kinds() -> None:
    engine = StackEngine()
    result = engine.try_push("5", ValueKind.INTEGER)
    assert result.ok
    assert result.message == "Pushed: 5"
    assert engine.locked_kind is ValueKind.INTEGER

    mismatch = engine.try_push("x", ValueKind.STRING)
    assert mismatch.error is StackError.TYPE_MISMATCH
    assert mismatch.message == "Stack type locked to Integer"
    assert engine.elements == (TypedValue(ValueKind.INTEGER, "5", 5),)


def test_capacity_boundary() -> None:
    engine = StackEngine()
    for i in range(19):
        assert engine.try_push(str(i), ValueKind.INTEGER).ok
    assert engine.try_push("19", ValueKind.INTEGER).ok
    assert engine.size == 20
    overflow = engine.try_push("20", ValueKind.INTEGER)
    assert overflow.error is StackError.CAPACITY_EXCEEDED
    assert engine.size == 20


def test_error_order_empty_then_capacity_then_parse_then_lock() -> None:
    engine = StackEngine(capacity=1)
    assert engine.try_push("", ValueKind.INTEGER).error is StackError.EMPTY_INPUT
    assert engine.try_push("1", ValueKind.INTEGER).ok
    assert engine.try_push("", ValueKind.STRING).error is StackError.EMPTY_INPUT
    assert engine.try_push("oops", ValueKind.INTEGER).error is StackError.CAPACITY_EXCEEDED

    engine = StackEngine()
    engine.try_push("1", ValueKind.INTEGER)
    assert engine.try_push("ab", ValueKind.CHARACTER).error is StackError.PARSE_ERROR
    assert engine.try_push("a", ValueKind.CHARACTER).error is StackError.TYPE_MISMATCH


def test_character_push_scenario() -> None:
    engine = StackEngine()
    assert engine.try_push("ab", ValueKind.CHARACTER).error is StackError.PARSE_ERROR
    assert engine.locked_kind is None
    assert engine.try_push("a", ValueKind.CHARACTER).ok
    assert engine.locked_kind is ValueKind.CHARACTER


def test_try_pop_returns_candidate_without_removing() -> None:
    engine = StackEngine()
    assert engine.try_pop().error is StackError.EMPTY_STACK
    engine.try_push("a", ValueKind.STRING)
    engine.try_push("b", ValueKind.STRING)
    candidate = engine.try_pop()
    assert candidate.value == TypedValue(ValueKind.STRING, "b", "b")
    assert engine.size == 2


def test_remove_top_releases_lock_when_emptied() -> None:
    engine = StackEngine()
    engine.try_push("1", ValueKind.INTEGER)
    engine.try_push("2", ValueKind.INTEGER)
    assert engine.remove_top().parsed == 2
    assert engine.locked_kind is ValueKind.INTEGER
    assert engine.remove_top().parsed == 1
    assert engine.locked_kind is None
    assert engine.is_empty()


def test_peek_does_not_mutate() -> None:
    engine = StackEngine()
    assert engine.peek().error is StackError.EMPTY_STACK
    engine.try_push("q", ValueKind.CHARACTER)
    result = engine.peek()
    assert result.message == "Peeked: q"
    assert engine.size == 1


def test_clear_notifies_listeners_and_reports_already_empty() -> None:
    engine = StackEngine()
    calls: list[str] = []
    engine.add_clear_listener(lambda: calls.append("cleared"))

    first = engine.clear()
    assert first.error is StackError.ALREADY_EMPTY
    assert calls == []

    for i in range(10):
        engine.try_push(str(i), ValueKind.INTEGER)
    assert engine.clear().ok
    assert engine.is_empty()
    assert engine.locked_kind is None
    assert calls == ["cleared"]


def test_push_pop_round_trip_restores_initial_state() -> None:
    engine = StackEngine()
    for text in ("x", "y", "z"):
        engine.try_push(text, ValueKind.STRING)
    while not engine.is_empty():
        candidate = engine.try_pop()
        assert candidate.ok
        engine.remove_top()
    assert engine.elements == ()
    assert engine.locked_kind is None
