# simplestate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass


@dataclass(frozen=True)
class State:
    """
    A named condition the machine can occupy. States are plain values: two
    instances with the same name are the same state, so callers can declare a
    state once and reuse it across configuration calls.
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError("State name must be a non-empty string")

    def __str__(self) -> str:
        return self.name
