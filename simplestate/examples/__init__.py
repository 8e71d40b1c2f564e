"""Example programs driving the state machine."""

from .bug import Bug, run_bug
from .onoff import build_onoff, run_onoff

__all__ = ["Bug", "build_onoff", "run_bug", "run_onoff"]
