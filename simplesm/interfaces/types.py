# simplesm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Optional, Union

StateID = str
EventID = str

# Handlers and hooks receive the owning machine as their first argument.
Handler = Callable[..., Any]
Hook = Callable[..., Any]

# What callers may pass to State.on(): a callable, a target state name, or nothing.
HandlerSpec = Optional[Union[Handler, StateID]]
