# tests/unit/test_handlers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from simplesm.core.errors import InvalidHandlerError
from simplesm.core.handlers import CallableHandler, NoopHandler, TransitionHandler, normalize_handler


def test_callable_is_wrapped_and_receives_machine():
    fn = MagicMock()
    machine = MagicMock()
    handler = normalize_handler(fn)
    assert isinstance(handler, CallableHandler)
    assert handler.fn is fn
    handler(machine, "a", 1)
    fn.assert_called_once_with(machine, "a", 1)


def test_string_becomes_transition():
    machine = MagicMock()
    handler = normalize_handler("state2")
    assert isinstance(handler, TransitionHandler)
    assert handler.target == "state2"
    handler(machine, "ignored", "args")
    machine.go.assert_called_once_with("state2")


def test_none_becomes_noop():
    machine = MagicMock()
    handler = normalize_handler(None)
    assert isinstance(handler, NoopHandler)
    assert handler(machine, 1, 2) is None
    assert machine.mock_calls == []


def test_already_normalized_handler_is_returned_unchanged():
    handler = TransitionHandler("x")
    assert normalize_handler(handler) is handler


@pytest.mark.parametrize("bad", [42, 1.5, ["state"], {"go": "x"}, b"state", object()])
def test_invalid_handler_types(bad):
    with pytest.raises(InvalidHandlerError):
        normalize_handler(bad)


def test_reprs():
    assert repr(TransitionHandler("s")) == "TransitionHandler('s')"
    assert repr(NoopHandler()) == "NoopHandler()"
