# simplesm/core/handlers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import TYPE_CHECKING, Any

from simplesm.core.errors import InvalidHandlerError
from simplesm.interfaces.types import Handler, HandlerSpec, StateID

if TYPE_CHECKING:
    from simplesm.core.state_machine import StateMachine


class _HandlerAdapter:
    """
    Internal base for adapters that give every handler specification the
    same calling convention: ``handler(machine, *args)``.
    """

    def __call__(self, machine: "StateMachine", *args: Any) -> Any:
        raise NotImplementedError()


class CallableHandler(_HandlerAdapter):
    """Wraps a user function; the machine is passed as the first argument."""

    def __init__(self, fn: Handler) -> None:
        self._fn = fn

    @property
    def fn(self) -> Handler:
        return self._fn

    def __call__(self, machine: "StateMachine", *args: Any) -> Any:
        return self._fn(machine, *args)

    def __repr__(self) -> str:
        return f"CallableHandler({self._fn!r})"


class TransitionHandler(_HandlerAdapter):
    """Shorthand handler that moves the machine to ``target``. Event arguments are ignored."""

    def __init__(self, target: StateID) -> None:
        self._target = target

    @property
    def target(self) -> StateID:
        return self._target

    def __call__(self, machine: "StateMachine", *args: Any) -> Any:
        machine.go(self._target)

    def __repr__(self) -> str:
        return f"TransitionHandler({self._target!r})"


class NoopHandler(_HandlerAdapter):
    """Handler registered without a callback. Accepts the event and does nothing."""

    def __call__(self, machine: "StateMachine", *args: Any) -> Any:
        return None

    def __repr__(self) -> str:
        return "NoopHandler()"


def normalize_handler(spec: HandlerSpec) -> _HandlerAdapter:
    """
    Resolve a handler specification once, at registration time.

    :param spec: A callable, the name of a state to transition to, or None.
    :raises InvalidHandlerError: For any other type.
    """
    if isinstance(spec, _HandlerAdapter):
        return spec
    if isinstance(spec, str):
        return TransitionHandler(spec)
    if spec is None:
        return NoopHandler()
    if callable(spec):
        return CallableHandler(spec)
    raise InvalidHandlerError(spec)
