"""simplestate: a small finite state machine with substates, guarded transitions
and entry/exit actions.

States and triggers are plain values. A machine is created with an initial
state, configured per state, and driven by firing trigger keys::

    machine = StateMachine(off)
    machine.configure(off).permit(toggle, on)
    machine.configure(on).permit(toggle, off).on_enter(lambda: print("on"))
    machine.fire("toggle")

Threading:
    The engine is synchronous and does no locking. Callers sharing a machine
    between threads must serialize access.

Error Handling:
    Firing a trigger the current state does not permit raises
    TriggerNotPermittedError and leaves the machine unchanged. Exceptions from
    caller actions and guards propagate unchanged.

Logging:
    Module loggers under the ``simplestate`` namespace emit DEBUG records for
    registrations and transitions. No handlers are installed.
"""

from .core import (
    Edge,
    HookManager,
    HookProtocol,
    State,
    StateConfig,
    StateMachine,
    StateMachineError,
    Trigger,
    TriggerNotPermittedError,
)

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "HookManager",
    "HookProtocol",
    "State",
    "StateConfig",
    "StateMachine",
    "StateMachineError",
    "Trigger",
    "TriggerNotPermittedError",
]
