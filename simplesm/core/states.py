# simplesm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Tuple

from simplesm.core.errors import DuplicateEventError, InvalidEventError, ReservedNameError
from simplesm.core.handlers import normalize_handler
from simplesm.interfaces.types import EventID, Handler, HandlerSpec, Hook, StateID

if TYPE_CHECKING:
    from simplesm.core.state_machine import StateMachine

ENTER = "enter"
EXIT = "exit"

# Names of StateMachine operations; never usable as event names.
RESERVED_NAMES = frozenset({"state", "go", "initialize", "current"})


class State:
    """
    A named state owned by exactly one StateMachine. Holds the event handler
    table plus the enter and exit hooks run when the machine moves in or out.

    States are created through ``StateMachine.state(name)``; constructing one
    directly leaves it detached from any registry.
    """

    def __init__(self, machine: "StateMachine", name: StateID) -> None:
        """
        :param machine: The owning state machine.
        :param name: Name identifying this state within its machine.
        """
        self._machine = machine
        self._name = name
        self.event_handlers: Dict[EventID, List[Handler]] = {}
        self.enter_hooks: List[Hook] = []
        self.exit_hooks: List[Hook] = []

    @property
    def name(self) -> StateID:
        return self._name

    @property
    def machine(self) -> "StateMachine":
        return self._machine

    @property
    def events(self) -> Tuple[EventID, ...]:
        """Event names registered on this state, in first-registration order."""
        return tuple(self.event_handlers)

    def has_event(self, event: EventID) -> bool:
        return event in self.event_handlers

    def handlers_for(self, event: EventID) -> Tuple[Handler, ...]:
        """Snapshot of the handlers for ``event``; empty if none are registered."""
        return tuple(self.event_handlers.get(event, ()))

    def on(self, event: EventID, handler: HandlerSpec = None) -> "State":
        """
        Register a handler for ``event`` on this state.

        ``enter`` and ``exit`` are lifecycle events: their handlers become hooks
        run when the machine enters or leaves this state, and no trigger is
        exposed for them. Any other name is an ordinary event. Registering the
        same event again adds another handler; all of them run in order.

        :param event: Event name.
        :param handler: A callable taking the machine plus event arguments,
            the name of a state to go to, or None for a no-op.
        :return: This state, so registrations can be chained.
        :raises InvalidHandlerError: If ``handler`` has an unsupported type.
        :raises ReservedNameError: If ``event`` names a machine operation.
        :raises DuplicateEventError: If duplicates are rejected by the machine options.
        """
        if not isinstance(event, str) or not event:
            raise InvalidEventError("event name must be a non-empty string", {"event": event})
        fn = normalize_handler(handler)

        if event == ENTER:
            self.enter_hooks.append(fn)
        elif event == EXIT:
            self.exit_hooks.append(fn)
        else:
            if event in RESERVED_NAMES:
                raise ReservedNameError(event)
            handlers = self.event_handlers.get(event)
            if handlers is None:
                handlers = self.event_handlers[event] = []
            elif self._machine.options.reject_duplicate_events:
                raise DuplicateEventError(event, self._name)
            handlers.append(fn)
            self._machine._expose_trigger(event)
        return self

    register = on

    def emit(self, event: EventID, *args: Any) -> "StateMachine":
        """See StateMachine.emit. Dispatch is against the machine's current state."""
        return self._machine.emit(event, *args)

    def state(self, name: StateID) -> "State":
        """See StateMachine.state."""
        return self._machine.state(name)

    def initialize(self, name: StateID) -> "StateMachine":
        """See StateMachine.initialize."""
        return self._machine.initialize(name)

    def __hash__(self) -> int:
        return hash((self._name, id(self)))

    def __eq__(self, other: object) -> bool:
        """States are equal only if they are the same object."""
        if not isinstance(other, State):
            return NotImplemented
        return id(self) == id(other)

    def __repr__(self) -> str:
        return f"State({self._name!r}, events={list(self.event_handlers)!r})"
