from __future__ import annotations

import pytest

from initcontainer.core.initializer import (
    FuncInitializer,
    Initializer,
    as_action,
    initializer_from_func,
)


def test_as_action_forwards_to_init() -> None:
    class Counter:
        def __init__(self) -> None:
            self.count = 0

        def init(self) -> None:
            self.count += 1

    counter = Counter()
    action = as_action(counter)

    assert counter.count == 0
    action()
    action()
    assert counter.count == 2


def test_as_action_requires_init_method() -> None:
    class NoInit:
        init = "not a method"

    with pytest.raises(TypeError, match="NoInit"):
        as_action(NoInit())  # type: ignore[arg-type]


def test_initializer_from_func_satisfies_protocol(recorder) -> None:
    initializer = initializer_from_func(recorder.action("wrapped"))

    assert isinstance(initializer, FuncInitializer)
    assert isinstance(initializer, Initializer)
    initializer.init()
    assert recorder.calls == ["wrapped"]
