# simplestate/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, List, Optional

from simplestate.core.errors import TriggerNotPermittedError
from simplestate.core.hooks import HookManager
from simplestate.core.state_config import StateConfig
from simplestate.core.states import State
from simplestate.core.triggers import TriggerLike, trigger_key
from simplestate.runtime.graph import StateRegistry

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A finite state machine with substates, guarded transitions and entry/exit
    actions. States and edges are registered through ``configure`` and may be
    added at any time, including between calls to ``fire``.

    The machine is synchronous and does no locking. All actions run on the
    caller's thread, in order, inside ``fire``. Callers sharing a machine
    between threads must serialize access themselves.

    Actions may fire further triggers on the same machine. Note that exit
    actions run before the current state is reassigned, so a nested ``fire``
    from an exit action sees the state being left; entry actions see the new
    state.
    """

    def __init__(self, initial_state: State, hooks: Optional[List[object]] = None) -> None:
        """
        :param initial_state: The state in which this machine begins. It is
            registered immediately; its entry action is not run.
        :param hooks: Optional list of hook objects implementing on_enter, on_exit, on_error.
        """
        self._registry = StateRegistry()
        self._hook_manager = HookManager(hooks)
        self._current: StateConfig = self._registry.register(initial_state)

    @property
    def state(self) -> State:
        """The state the machine is currently in."""
        return self._current.state

    @property
    def registry(self) -> StateRegistry:
        return self._registry

    @property
    def hook_manager(self) -> HookManager:
        return self._hook_manager

    def configure(self, state: State) -> StateConfig:
        """
        Return the configuration for ``state``, creating it on first use.
        Repeated calls for the same state return the same object.
        """
        return self._registry.register(state)

    def can_fire(self, trigger: TriggerLike) -> bool:
        """
        Check whether ``trigger`` is permitted in the current state. Guards are
        evaluated on every call.

        :param trigger: A Trigger or its key.
        """
        edge = self._current.edge_for(trigger_key(trigger))
        if edge is None:
            return False
        return edge.evaluate_guards()

    def fire(self, trigger: TriggerLike, context: Any = None) -> None:
        """
        Fire a trigger, moving the machine to the edge's target state.

        Unless the target is a direct substate of the current state, the exit
        actions of the current state and each of its ancestors run, innermost
        first. The current state is then reassigned, the target's
        ``on_enter_from`` action for this trigger runs with ``context``, and
        finally its ``on_enter`` action runs. Guards are evaluated again here
        even if the caller has just called ``can_fire``.

        :param trigger: A Trigger or its key.
        :param context: Passed to the target's ``on_enter_from`` action.
        :raises TriggerNotPermittedError: If the trigger is not registered on the
            current state or all of its guards deny it. The machine is unchanged.
        """
        key = trigger_key(trigger)
        if not self.can_fire(key):
            logger.debug("Rejected trigger '%s' in state %s", key, self._current.state)
            raise TriggerNotPermittedError(key, self._current.state)

        edge = self._current.edge_for(key)
        source = self._current
        target = self._registry.register(edge.target)

        try:
            # Only the target's immediate parent is compared with the source.
            if not self._is_direct_substate(target, source):
                for config in self._registry.ancestors(source):
                    self._notify_exit(config)

            self._current = target
            logger.debug("Transitioned %s -> %s via '%s'", source.state, target.state, key)

            enter_from = target.enter_from_action(key)
            if enter_from is not None:
                enter_from(context)
            self._notify_enter(target)
        except Exception as e:
            self._hook_manager.execute_on_error(e)
            raise

    def is_in_state(self, state: State) -> bool:
        """
        Return True if the machine is in ``state`` or in any substate of it,
        at any depth.
        """
        return any(config.state == state for config in self._registry.ancestors(self._current))

    def _is_direct_substate(self, target: StateConfig, source: StateConfig) -> bool:
        return target.parent is not None and target.parent == source.state

    def _notify_enter(self, config: StateConfig) -> None:
        """Run the state's entry action, then listener hooks."""
        if config.enter_action is not None:
            config.enter_action()
        self._hook_manager.execute_on_enter(config.state)

    def _notify_exit(self, config: StateConfig) -> None:
        """Run the state's exit action, then listener hooks."""
        if config.exit_action is not None:
            config.exit_action()
        self._hook_manager.execute_on_exit(config.state)

    def __repr__(self) -> str:
        return f"StateMachine(state={self._current.state.name!r}, states={len(self._registry)})"
