"""Runtime support for the state machine engine."""

from .graph import StateRegistry

__all__ = ["StateRegistry"]
