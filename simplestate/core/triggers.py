# simplestate/core/triggers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Trigger:
    """
    Represents an input that may move the machine from one state to another.
    Triggers are compared by key, which is also what callers pass to
    ``StateMachine.fire``.
    """

    key: str

    def __post_init__(self) -> None:
        if not self.key or not isinstance(self.key, str):
            raise ValueError("Trigger key must be a non-empty string")

    def __str__(self) -> str:
        return self.key


TriggerLike = Union[Trigger, str]


def trigger_key(trigger: TriggerLike) -> str:
    """Reduce a Trigger or a raw key string to the key used for lookups."""
    if isinstance(trigger, Trigger):
        return trigger.key
    return trigger
