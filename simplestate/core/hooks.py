# simplestate/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import List, Optional, Protocol, runtime_checkable

from simplestate.core.states import State


@runtime_checkable
class HookProtocol(Protocol):
    """
    Machine-wide lifecycle listener. Implementations may define any subset of
    these methods; missing ones are skipped.
    """

    def on_enter(self, state: State) -> None:
        ...

    def on_exit(self, state: State) -> None:
        ...

    def on_error(self, error: Exception) -> None:
        ...


class HookManager:
    """
    Manages the registration and execution of hooks that listen to state machine
    lifecycle events (on_enter, on_exit, on_error). Users can attach logging,
    monitoring, or custom side effects without altering per-state actions.
    """

    def __init__(self, hooks: Optional[List[object]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[object] = list(hooks) if hooks else []

    def register_hook(self, hook: object) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the HookProtocol methods.
        """
        self._hooks.append(hook)

    @property
    def hooks(self) -> List[object]:
        return list(self._hooks)

    def execute_on_enter(self, state: State) -> None:
        """
        Run all hooks' on_enter logic when entering a state.
        """
        _HookInvoker(self._hooks).invoke("on_enter", state)

    def execute_on_exit(self, state: State) -> None:
        """
        Run all hooks' on_exit logic when exiting a state.
        """
        _HookInvoker(self._hooks).invoke("on_exit", state)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when an action raises during a transition.
        """
        _HookInvoker(self._hooks).invoke("on_error", error)


class _HookInvoker:
    """
    Internal helper that iterates through a list of hooks and invokes one of
    their lifecycle methods in registration order.
    """

    def __init__(self, hooks: List[object]) -> None:
        self._hooks = hooks

    def invoke(self, method: str, arg: object) -> None:
        for hook in self._hooks:
            fn = getattr(hook, method, None)
            if callable(fn):
                fn(arg)
