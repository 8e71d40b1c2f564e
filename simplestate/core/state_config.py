# simplestate/core/state_config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from simplestate.core.states import State
from simplestate.core.transitions import Edge, Guard
from simplestate.core.triggers import Trigger

if TYPE_CHECKING:
    from simplestate.runtime.graph import StateRegistry

logger = logging.getLogger(__name__)

Action = Callable[[], None]
ContextAction = Callable[[Any], None]


class StateConfig:
    """
    Holds everything configured for a single state: its outgoing edges, its
    entry/exit hooks and its parent state. Instances are created by the
    registry and shared; configuring the same state twice yields the same
    object, so changes made through one handle are visible through the other.

    Every configuration method returns the config itself so calls can be chained::

        machine.configure(assigned).substate_of(open_).permit(close, closed)
    """

    def __init__(self, registry: "StateRegistry", state: State) -> None:
        """
        :param registry: The registry that owns this config. Targets and parents
            named during configuration are registered through it.
        :param state: The state this config describes.
        """
        self._registry = registry
        self._state = state
        self._parent: Optional[State] = None
        self._on_enter: Optional[Action] = None
        self._on_exit: Optional[Action] = None
        self._on_enter_from: Dict[str, ContextAction] = {}
        self._permitted: Dict[str, Edge] = {}

    def permit(self, trigger: Trigger, target: State) -> "StateConfig":
        """
        Allow a transition to ``target`` whenever ``trigger`` fires. Any edge
        previously registered for the trigger is replaced, guards included.

        :param trigger: The trigger to permit.
        :param target: The state to move to.
        """
        self._registry.register(target)
        self._permitted[trigger.key] = Edge(trigger, target)
        logger.debug("Permitted %s -> %s via '%s'", self._state, target, trigger)
        return self

    def permit_if(self, trigger: Trigger, target: State, predicate: Guard) -> "StateConfig":
        """
        Allow a transition to ``target`` via ``trigger`` only while ``predicate``
        returns True. Calling this again for the same trigger adds another
        predicate to the existing edge (any passing predicate permits the
        transition); the target from the first registration is kept.

        :param trigger: The trigger to permit.
        :param target: The state to move to.
        :param predicate: Zero-argument callable returning a bool.
        """
        self._registry.register(target)
        edge = self._permitted.get(trigger.key)
        if edge is None:
            edge = Edge(trigger, target)
            self._permitted[trigger.key] = edge
        elif edge.target != target:
            logger.debug(
                "Guard for '%s' on %s added to existing edge; keeping target %s over %s",
                trigger,
                self._state,
                edge.target,
                target,
            )
        edge.add_guard(predicate)
        return self

    def on_enter(self, action: Action) -> "StateConfig":
        """
        Set the action run whenever the state is entered, whatever the trigger,
        including re-entrant transitions. Replaces any previous entry action.
        """
        self._on_enter = action
        return self

    def on_exit(self, action: Action) -> "StateConfig":
        """
        Set the action run when the state is exited, including re-entrant
        transitions. Replaces any previous exit action.
        """
        self._on_exit = action
        return self

    def on_enter_from(self, trigger: Trigger, action: ContextAction) -> "StateConfig":
        """
        Set the action run when the state is entered via ``trigger``. The action
        receives the context passed to ``fire``. Runs before the ``on_enter`` action.
        """
        self._on_enter_from[trigger.key] = action
        return self

    def substate_of(self, parent: State) -> "StateConfig":
        """
        Make this state a substate of ``parent``. While the machine is in this
        state it is also considered to be in ``parent`` and in all of its
        ancestors. A state has at most one parent; calling again replaces it.
        """
        self._registry.register(parent)
        self._parent = parent
        logger.debug("%s is now a substate of %s", self._state, parent)
        return self

    # -------------------------------------------------------------------------
    # Read access used by the machine
    # -------------------------------------------------------------------------

    @property
    def state(self) -> State:
        return self._state

    @property
    def parent(self) -> Optional[State]:
        """The parent state key, resolved through the registry."""
        return self._parent

    @property
    def enter_action(self) -> Optional[Action]:
        return self._on_enter

    @property
    def exit_action(self) -> Optional[Action]:
        return self._on_exit

    def enter_from_action(self, key: str) -> Optional[ContextAction]:
        return self._on_enter_from.get(key)

    def edge_for(self, key: str) -> Optional[Edge]:
        """Return the edge registered for a trigger key, or None."""
        return self._permitted.get(key)

    def __repr__(self) -> str:
        parent = self._parent.name if self._parent else None
        return f"StateConfig(state={self._state.name!r}, parent={parent!r})"
