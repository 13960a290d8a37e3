"""
Core package providing the state machine runtime.

Architecture:
- State holds the handler table and enter/exit hooks for one named state
- StateMachine owns the states, tracks the current one and performs transitions
- Handler specifications are normalized once, when they are registered

Cross-cutting:
- Errors derive from SSMError and propagate to the direct caller
- Optional logging of dispatches, transitions and handler failures
"""

from .errors import (
    ConfigurationError,
    DuplicateEventError,
    EventNotDefinedError,
    InvalidEventError,
    InvalidHandlerError,
    InvalidStateError,
    NotInitializedError,
    ReservedNameError,
    SSMError,
    UnknownStateError,
)
from .handlers import CallableHandler, NoopHandler, TransitionHandler, normalize_handler
from .options import MachineOptions
from .states import RESERVED_NAMES, State
from .state_machine import EventTrigger, StateMachine

__all__ = [
    # Machine and states
    "StateMachine",
    "State",
    "EventTrigger",
    "MachineOptions",
    "RESERVED_NAMES",
    # Handlers
    "CallableHandler",
    "TransitionHandler",
    "NoopHandler",
    "normalize_handler",
    # Errors
    "SSMError",
    "NotInitializedError",
    "UnknownStateError",
    "EventNotDefinedError",
    "ReservedNameError",
    "InvalidHandlerError",
    "DuplicateEventError",
    "InvalidStateError",
    "InvalidEventError",
    "ConfigurationError",
]
