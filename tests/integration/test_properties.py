# tests/integration/test_properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Property-based checks of dispatch and transition ordering."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from simplesm import RESERVED_NAMES, StateMachine

names = st.text(min_size=1, max_size=12).filter(lambda s: s not in RESERVED_NAMES and s not in ("enter", "exit"))


@pytest.mark.property
@given(state_names=st.lists(names, min_size=1, max_size=6, unique=True), data=st.data())
def test_go_to_current_state_never_runs_hooks(state_names, data):
    fired = []
    sm = StateMachine()
    for name in state_names:
        sm.state(name).on("enter", lambda m, n=name: fired.append(n)).on("exit", lambda m, n=name: fired.append(n))
    start = data.draw(st.sampled_from(state_names))
    sm.initialize(start)
    sm.go(start)
    assert fired == []
    assert sm.current == start


@pytest.mark.property
@given(event=names, count=st.integers(min_value=1, max_value=20), args=st.lists(st.integers(), max_size=3))
def test_every_handler_runs_once_in_order(event, count, args):
    calls = []
    sm = StateMachine()
    state = sm.state("s")
    for i in range(count):
        state.on(event, lambda m, *a, i=i: calls.append((i, a)))
    sm.initialize("s").emit(event, *args)
    assert calls == [(i, tuple(args)) for i in range(count)]


@pytest.mark.property
@given(
    exits=st.integers(min_value=0, max_value=5),
    enters=st.integers(min_value=0, max_value=5),
)
def test_transition_runs_exit_hooks_then_enter_hooks(exits, enters):
    log = []
    sm = StateMachine()
    source = sm.state("source")
    target = sm.state("target")
    for i in range(exits):
        source.on("exit", lambda m, i=i: log.append(("exit", i, m.current)))
    for i in range(enters):
        target.on("enter", lambda m, i=i: log.append(("enter", i, m.current)))
    sm.initialize("source").go("target")
    expected = [("exit", i, "source") for i in range(exits)] + [("enter", i, "target") for i in range(enters)]
    assert log == expected
    assert sm.current == "target"


@pytest.mark.property
@given(path=st.lists(st.sampled_from(["a", "b", "c"]), max_size=30))
def test_current_always_names_a_registered_state(path):
    sm = StateMachine()
    for name in ("a", "b", "c"):
        sm.state(name)
    sm.initialize("a")
    for name in path:
        sm.go(name)
        assert sm.current in sm
    assert sm.current == (path[-1] if path else "a")
