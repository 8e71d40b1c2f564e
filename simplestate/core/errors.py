# simplestate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional


class StateMachineError(Exception):
    """
    Base exception class for errors raised by the state machine engine.
    """


class TriggerNotPermittedError(StateMachineError):
    """
    Raised when a trigger is fired that the current state does not permit, either
    because no edge is registered for it or because every guard denied it.

    :param trigger_key: The key of the rejected trigger.
    :param state: The state the machine was in when the trigger was rejected.
    """

    def __init__(self, trigger_key: str, state: Optional[Any] = None) -> None:
        self.trigger_key = trigger_key
        self.state = state
        if state is None:
            message = f"unsupported trigger '{trigger_key}'"
        else:
            message = f"unsupported trigger '{trigger_key}' in state '{state}'"
        super().__init__(message)
