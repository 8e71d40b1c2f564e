# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List
from unittest.mock import MagicMock

import pytest

from simplestate.core.states import State
from simplestate.core.triggers import Trigger


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def s1() -> State:
    return State("s1")


@pytest.fixture
def s2() -> State:
    return State("s2")


@pytest.fixture
def s3() -> State:
    return State("s3")


@pytest.fixture
def s4() -> State:
    return State("s4")


@pytest.fixture
def tr1() -> Trigger:
    return Trigger("tr1")


@pytest.fixture
def tr2() -> Trigger:
    return Trigger("tr2")


@pytest.fixture
def tr3() -> Trigger:
    return Trigger("tr3")


@pytest.fixture
def record() -> List[str]:
    """An ordered log that entry/exit actions append to."""
    return []


@pytest.fixture
def dummy_hooks() -> List[MagicMock]:
    """A listener hook with mocked lifecycle methods."""
    hook = MagicMock()
    hook.on_enter = MagicMock()
    hook.on_exit = MagicMock()
    hook.on_error = MagicMock()
    return [hook]
