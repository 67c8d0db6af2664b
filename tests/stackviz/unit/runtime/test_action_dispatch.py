from stackviz.runtime.action_dispatch import ActionDispatcher


def test_action_dispatch_direct_and_prefix_handlers() -> None:
    called: list[tuple[str, str | None]] = []

    def on_direct() -> bool:
        called.append(("direct", None))
        return True

    def on_prefix(value: str) -> bool:
        called.append(("prefix", value))
        return True

    dispatcher = ActionDispatcher(
        direct_handlers={"pop": on_direct},
        prefixed_handlers=(("push:", on_prefix),),
    )
    assert dispatcher.dispatch("pop") is True
    assert dispatcher.dispatch("push:a:b") is True
    assert dispatcher.dispatch("unknown") is None
    assert called == [("direct", None), ("prefix", "a:b")]
