"""
Core package providing the state machine engine.

- states / triggers: value identifiers supplied by the caller
- transitions: edges and guard evaluation
- state_config: per-state configuration API
- state_machine: firing triggers and containment queries
"""

# Import order matters to avoid circular dependencies
from .errors import StateMachineError, TriggerNotPermittedError
from .states import State
from .triggers import Trigger
from .transitions import Edge
from .state_config import StateConfig
from .hooks import HookManager, HookProtocol
from .state_machine import StateMachine

__all__ = [
    "StateMachineError",
    "TriggerNotPermittedError",
    "State",
    "Trigger",
    "Edge",
    "StateConfig",
    "HookManager",
    "HookProtocol",
    "StateMachine",
]
