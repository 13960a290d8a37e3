# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def machine():
    """A fresh machine with default options."""
    from simplesm.core.state_machine import StateMachine

    return StateMachine()


@pytest.fixture
def machine_factory():
    """Returns a factory function to create machines with specific options."""
    from simplesm.core.state_machine import StateMachine

    def _factory(**options):
        return StateMachine(**options)

    return _factory


@pytest.fixture
def toggle_machine():
    """Two states that swap on 'event1', initialized to 'state1'."""
    from simplesm.core.state_machine import StateMachine

    sm = StateMachine()
    sm.state("state1").on("event1", "state2")
    sm.state("state2").on("event1", "state1")
    sm.initialize("state1")
    return sm


@pytest.fixture
def recorder():
    """A MagicMock used as a handler or hook to record calls."""
    return MagicMock()


@pytest.fixture
def call_log():
    """A list that ordered handlers and hooks append to."""
    return []


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from simplesm.core.errors import (
        EventNotDefinedError,
        InvalidHandlerError,
        NotInitializedError,
        ReservedNameError,
        SSMError,
        UnknownStateError,
    )

    return (
        SSMError,
        NotInitializedError,
        UnknownStateError,
        EventNotDefinedError,
        ReservedNameError,
        InvalidHandlerError,
    )
