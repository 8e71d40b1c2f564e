# simplestate/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Callable, List, Optional

from simplestate.core.states import State
from simplestate.core.triggers import Trigger

Guard = Callable[[], bool]


class Edge:
    """
    Defines a possible path out of a state: the trigger that takes it, the
    target state, and the guard predicates that decide whether it may be taken
    at the moment the trigger fires.
    """

    def __init__(self, trigger: Trigger, target: State, guards: Optional[List[Guard]] = None) -> None:
        """
        :param trigger: The trigger that owns this edge.
        :param target: The state the machine moves to when the edge is taken.
        :param guards: Guard predicates; an edge without guards is always satisfiable.
        """
        self._trigger = trigger
        self._target = target
        self._guards = list(guards) if guards else []

    def add_guard(self, guard: Guard) -> None:
        """
        Append a guard predicate. The target state is left untouched.
        """
        self._guards.append(guard)

    def evaluate_guards(self) -> bool:
        """
        Determine whether the edge may be taken right now.

        :return: True if there are no guards or if any guard returns True.
        """
        return _GuardEvaluator().evaluate(self._guards)

    @property
    def trigger(self) -> Trigger:
        """The trigger that owns this edge."""
        return self._trigger

    @property
    def target(self) -> State:
        """The target state of the edge."""
        return self._target

    @property
    def guards(self) -> List[Guard]:
        """The guard predicates, in registration order."""
        return self._guards

    @property
    def is_guarded(self) -> bool:
        return bool(self._guards)

    def __repr__(self) -> str:
        return f"Edge(trigger={self._trigger.key!r}, target={self._target.name!r}, guards={len(self._guards)})"


class _GuardEvaluator:
    """
    Internal helper to evaluate a list of guard predicates.
    """

    def evaluate(self, guards: List[Guard]) -> bool:
        """
        Check guards in order, stopping at the first one that passes. Nothing is
        cached; every call runs the predicates again.

        :param guards: List of guard callables.
        :return: True if the list is empty or any guard returns True.
        """
        if not guards:
            return True
        for g in guards:
            if g():
                return True
        return False
