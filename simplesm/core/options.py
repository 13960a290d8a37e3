# simplesm/core/options.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from simplesm.core.errors import ConfigurationError

DEFAULT_MACHINE_NAME = "StateMachine"

# Keys accepted from older configuration dictionaries.
_ALIASES = {
    "logExceptions": "log_exceptions",
    "rejectDuplicateEvents": "reject_duplicate_events",
}


@dataclass(frozen=True)
class MachineOptions:
    """
    Configuration for a StateMachine.

    :param name: Identifier used as the prefix of every log line.
    :param verbose: Log every event dispatch and every transition at INFO level
        on the ``simplesm`` logger. Nothing is shown until the host configures
        logging for that level, e.g. ``logging.basicConfig(level=logging.INFO)``.
    :param log_exceptions: Log (and still re-raise) exceptions escaping handlers and hooks.
    :param reject_duplicate_events: Refuse a second registration of the same
        event on the same state instead of accumulating handlers.
    """

    name: str = DEFAULT_MACHINE_NAME
    verbose: bool = False
    log_exceptions: bool = False
    reject_duplicate_events: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError("machine name must be a non-empty string", {"name": self.name})

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MachineOptions":
        """
        Build options from a plain dictionary, accepting camelCase aliases.
        Keys whose value is None keep their default.
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in mapping.items():
            key = _ALIASES.get(key, key)
            if key not in known:
                raise ConfigurationError(f"unknown option: {key}", {"option": key})
            if value is None:
                continue
            values[key] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls, options: Optional[Union["MachineOptions", Mapping[str, Any]]] = None, **overrides: Any
    ) -> "MachineOptions":
        """Normalize whatever a caller handed to StateMachine() into MachineOptions."""
        if options is None:
            resolved = cls()
        elif isinstance(options, cls):
            resolved = options
        elif isinstance(options, Mapping):
            resolved = cls.from_mapping(options)
        else:
            raise ConfigurationError(
                f"options must be MachineOptions or a mapping, got {type(options).__name__}",
                {"options_type": type(options).__name__},
            )
        if overrides:
            try:
                resolved = replace(resolved, **overrides)
            except TypeError as exc:
                raise ConfigurationError(str(exc), {"overrides": sorted(overrides)}) from exc
        return resolved
