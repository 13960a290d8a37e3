"""simplesm: a minimal synchronous finite state machine runtime

Hosts declare named states, attach event handlers and enter/exit hooks to
each of them, pick a starting state and drive transitions by emitting events.

Responsibilities:
    - Lazy state registration
    - Event handler registration (function, target state name, or no-op)
    - Dispatch against the current state only
    - Transitions with ordered exit and enter hooks

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; callers serialize access to a machine

    Error Handling:
        - Structured error hierarchy rooted at SSMError
        - Errors always propagate to the direct caller

    Logging:
        - Standard library logging under the ``simplesm`` logger namespace
        - Dispatch and transition lines when ``verbose`` is set
        - Handler failures logged once, then re-raised, when ``log_exceptions`` is set
"""

from .core import (
    RESERVED_NAMES,
    ConfigurationError,
    DuplicateEventError,
    EventNotDefinedError,
    EventTrigger,
    InvalidEventError,
    InvalidHandlerError,
    InvalidStateError,
    MachineOptions,
    NotInitializedError,
    ReservedNameError,
    SSMError,
    State,
    StateMachine,
    UnknownStateError,
)

__version__ = "0.1.0"

__all__ = [
    "StateMachine",
    "State",
    "EventTrigger",
    "MachineOptions",
    "RESERVED_NAMES",
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
