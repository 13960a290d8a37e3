# simplesm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class SSMError(Exception):
    """
    Base exception class for errors raised by the state machine runtime.

    :param message: Human readable description of the failure.
    :param details: Optional dictionary of contextual identifiers.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotInitializedError(SSMError):
    """
    Raised when an operation needing a current state runs before initialize().
    """

    def __init__(self, machine_name: str = "StateMachine") -> None:
        super().__init__(
            f"{machine_name}: the state machine has not been initialized",
            {"machine": machine_name},
        )


class UnknownStateError(SSMError):
    """
    Raised when a transition or initialization targets a state that was never registered.
    """

    def __init__(self, state_name: str) -> None:
        super().__init__(f"{state_name} state is not defined", {"state": state_name})
        self.state_name = state_name


class EventNotDefinedError(SSMError):
    """
    Raised when an emitted event has no handler on the current state.
    """

    def __init__(self, event: str, state_name: Optional[str] = None) -> None:
        if state_name is None:
            message = f"{event} event is not defined for any state"
        else:
            message = f"{event} event not defined for {state_name} state"
        super().__init__(message, {"event": event, "state": state_name})
        self.event = event
        self.state_name = state_name


class ReservedNameError(SSMError):
    """
    Raised when an event name collides with one of the machine's own operations.
    """

    def __init__(self, event: str) -> None:
        super().__init__(f"{event} method is reserved for the api", {"event": event})
        self.event = event


class InvalidHandlerError(SSMError, TypeError):
    """
    Raised when a handler is neither a callable, a state name, nor None.
    """

    def __init__(self, handler: Any) -> None:
        super().__init__(
            f"invalid event handler: {type(handler).__name__}",
            {"handler_type": type(handler).__name__},
        )
        self.handler = handler


class DuplicateEventError(SSMError):
    """
    Raised when an event is registered twice on one state and the machine
    was configured to reject duplicate registrations.
    """

    def __init__(self, event: str, state_name: str) -> None:
        super().__init__(
            f"{event} event already defined for {state_name} state",
            {"event": event, "state": state_name},
        )
        self.event = event
        self.state_name = state_name


class InvalidStateError(SSMError, ValueError):
    """
    Raised when a state name is not a non-empty string.
    """


class InvalidEventError(SSMError, ValueError):
    """
    Raised when an event name is not a non-empty string.
    """


class ConfigurationError(SSMError):
    """
    Raised when machine options cannot be interpreted.
    """
