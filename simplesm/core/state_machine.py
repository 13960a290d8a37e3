# simplesm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from simplesm.core.errors import EventNotDefinedError, InvalidStateError, NotInitializedError, UnknownStateError
from simplesm.core.options import MachineOptions
from simplesm.core.states import State
from simplesm.interfaces.types import EventID, Handler, StateID

logger = logging.getLogger(__name__)


class EventTrigger:
    """
    Callable bound to one event name. Calling it is the same as
    ``machine.emit(event, *args)``; the state whose handlers run is looked up
    when the trigger is called, not when it was created.
    """

    def __init__(self, machine: "StateMachine", event: EventID) -> None:
        self._machine = machine
        self._event = event

    @property
    def event(self) -> EventID:
        return self._event

    def __call__(self, *args: Any) -> "StateMachine":
        return self._machine.emit(self._event, *args)

    def __repr__(self) -> str:
        return f"EventTrigger({self._event!r})"


class StateMachine:
    """
    A flat, synchronous finite state machine.

    States are created lazily with ``state(name)`` and configured with
    ``State.on``. After ``initialize`` picks the starting state, ``emit``
    dispatches events to the handlers of the current state and ``go`` moves
    between states, running exit hooks of the old state and then enter hooks
    of the new one.

    Every handler and hook is called with the machine as its first argument,
    so it can call ``go`` or ``emit`` itself. Nested calls run immediately on
    the same stack; there is no event queue.

    Instances are not thread-safe. Callers that share one between threads
    must serialize access themselves.
    """

    def __init__(self, options: Optional[Union[MachineOptions, Mapping[str, Any]]] = None, **overrides: Any) -> None:
        """
        :param options: MachineOptions, a mapping of option names, or None for defaults.
        :param overrides: Individual option values applied on top of ``options``.
        """
        self.options = MachineOptions.coerce(options, **overrides)
        self._states: Dict[StateID, State] = {}
        self._current: Optional[State] = None
        self._triggers: Dict[EventID, EventTrigger] = {}
        self._call_depth = 0
        # Exceptions already logged during the current top-level call.
        self._logged_errors: List[BaseException] = []

    @property
    def name(self) -> str:
        return self.options.name

    @property
    def is_initialized(self) -> bool:
        return self._current is not None

    @property
    def current(self) -> StateID:
        """Name of the current state."""
        return self._require_current().name

    @property
    def current_state(self) -> State:
        """The current State object."""
        return self._require_current()

    @property
    def state_names(self) -> Tuple[StateID, ...]:
        return tuple(self._states)

    @property
    def triggers(self) -> Mapping[EventID, EventTrigger]:
        """Read-only view of the triggers exposed so far, keyed by event name."""
        return MappingProxyType(self._triggers)

    def has_state(self, name: StateID) -> bool:
        return name in self._states

    def __contains__(self, name: object) -> bool:
        return name in self._states

    def state(self, name: StateID) -> State:
        """
        Get the state called ``name``, creating an empty one on first use.

        :raises InvalidStateError: If ``name`` is not a non-empty string.
        """
        existing = self._states.get(name) if isinstance(name, str) else None
        if existing is not None:
            return existing
        if not isinstance(name, str) or not name:
            raise InvalidStateError("state name must be a non-empty string", {"state": name})
        created = self._states[name] = State(self, name)
        return created

    def initialize(self, name: StateID) -> "StateMachine":
        """
        Make ``name`` the current state. No hooks run.

        :raises UnknownStateError: If no state called ``name`` exists; the
            current state is left unchanged.
        """
        state = self._states.get(name)
        if state is None:
            raise UnknownStateError(name)
        self._current = state
        return self

    def emit(self, event: EventID, *args: Any) -> "StateMachine":
        """
        Run every handler registered for ``event`` on the current state, in
        registration order, passing ``args`` through.

        :raises NotInitializedError: Before ``initialize``.
        :raises EventNotDefinedError: If the current state has no handler for ``event``.
        """
        state = self._require_current()
        handlers = state.event_handlers.get(event)
        if not handlers:
            raise EventNotDefinedError(event, state.name)
        if self.options.verbose:
            logger.info("%s: %s.%s", self.options.name, state.name, event)
        # Snapshot so handlers registered during dispatch wait for the next emit.
        self._run(tuple(handlers), state, args)
        return self

    def go(self, name: StateID) -> "StateMachine":
        """
        Transition to the state called ``name``.

        Going to the current state does nothing and runs no hooks. Otherwise
        the exit hooks of the current state run, the current state is updated,
        then the enter hooks of the new state run. If an exit hook raises, the
        machine stays in the old state; if an enter hook raises, the machine is
        already in the new state.

        :raises NotInitializedError: Before ``initialize``.
        :raises UnknownStateError: If no state called ``name`` exists.
        """
        current = self._require_current()
        target = self._states.get(name)
        if target is None:
            raise UnknownStateError(name)
        if target is current:
            return self

        if self.options.verbose:
            logger.info("%s: %s -> %s", self.options.name, current.name, target.name)
        self._run(tuple(current.exit_hooks), current, ())
        self._current = target
        self._run(tuple(target.enter_hooks), target, ())
        return self

    def trigger(self, event: EventID) -> EventTrigger:
        """
        Return the trigger exposed for ``event``.

        :raises EventNotDefinedError: If no state has registered ``event``.
        """
        trigger = self._triggers.get(event)
        if trigger is None:
            raise EventNotDefinedError(event)
        return trigger

    def derive_event_trigger(self, event: EventID) -> EventTrigger:
        """Build a new trigger for ``event`` without registering it."""
        return EventTrigger(self, event)

    def _expose_trigger(self, event: EventID) -> None:
        if event not in self._triggers:
            self._triggers[event] = self.derive_event_trigger(event)

    def _require_current(self) -> State:
        if self._current is None:
            raise NotInitializedError(self.options.name)
        return self._current

    def _run(self, fns: Iterable[Handler], state: State, args: Tuple[Any, ...]) -> None:
        """
        Call each handler or hook in order with the machine as first argument.

        With ``log_exceptions`` set, an exception is logged by the innermost
        frame it escapes, naming that frame's state, then re-raised unchanged.
        Outer frames skip exceptions that were already logged.
        """
        for fn in fns:
            self._call_depth += 1
            try:
                fn(self, *args)
            except Exception as exc:
                if self.options.log_exceptions and not any(exc is seen for seen in self._logged_errors):
                    self._logged_errors.append(exc)
                    logger.exception("%s: %s ! %s", self.options.name, state.name, exc)
                raise
            finally:
                self._call_depth -= 1
                if self._call_depth == 0:
                    self._logged_errors.clear()

    def __repr__(self) -> str:
        current = self._current.name if self._current is not None else None
        return f"StateMachine(name={self.options.name!r}, current={current!r}, states={list(self._states)!r})"
