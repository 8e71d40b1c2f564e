"""A bug tracker item whose lifecycle is driven by a state machine."""

import logging
import sys
from typing import Optional, TextIO

from simplestate.core.errors import TriggerNotPermittedError
from simplestate.core.state_machine import StateMachine
from simplestate.core.states import State
from simplestate.core.triggers import Trigger

logger = logging.getLogger(__name__)

# states
OPEN = State("Open")
ASSIGNED = State("Assigned")
CLOSED = State("Closed")

# triggers
ASSIGN = Trigger("assign")
CLOSE = Trigger("close")


class Bug:
    """
    Tracks a bug through Open, Assigned and Closed. Assigned is a substate of
    Open, so an assigned bug is still open. Reassigning re-enters Assigned,
    which first notifies the previous assignee.
    """

    def __init__(self, title: str, out: Optional[TextIO] = None) -> None:
        self.title = title
        self.assignee: Optional[str] = None
        self._out = out or sys.stdout

        sm = StateMachine(OPEN)
        sm.configure(OPEN).permit(ASSIGN, ASSIGNED)
        (
            sm.configure(ASSIGNED)
            .substate_of(OPEN)
            .permit(CLOSE, CLOSED)
            .permit(ASSIGN, ASSIGNED)
            .on_enter_from(ASSIGN, self._on_assigned)
            .on_exit(self.deassigned)
        )
        sm.configure(CLOSED).on_enter(lambda: self.send_email(f"{self.title} has been closed"))
        self._sm = sm

    @property
    def state(self) -> State:
        return self._sm.state

    @property
    def is_open(self) -> bool:
        return self._sm.is_in_state(OPEN)

    def assign(self, assignee: str) -> bool:
        return self._fire(ASSIGN, assignee)

    def close(self) -> bool:
        return self._fire(CLOSE)

    def deassigned(self) -> None:
        self.send_email(f"{self.title} has been unassigned from you")

    def send_email(self, msg: str) -> None:
        print(f"Sending Email => {self.assignee} - {msg}", file=self._out)

    def _on_assigned(self, assignee: str) -> None:
        self.assignee = assignee
        self.send_email(f"{self.title} assigned to you")

    def _fire(self, trigger: Trigger, context: object = None) -> bool:
        try:
            self._sm.fire(trigger, context)
        except TriggerNotPermittedError as e:
            logger.debug("Bug '%s': %s", self.title, e)
            print(f"{trigger} failed {e}", file=self._out)
            return False
        return True


def run_bug(out: Optional[TextIO] = None) -> Bug:
    """Walk a bug through two assignments and a close."""
    bug = Bug("bad bug", out=out)
    bug.assign("frank")
    bug.assign("joe")
    bug.close()
    return bug
