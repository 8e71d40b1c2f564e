"""A light switch toggled by typing a single space."""

import sys
from typing import Callable, Optional, TextIO

from simplestate.core.errors import TriggerNotPermittedError
from simplestate.core.state_machine import StateMachine
from simplestate.core.states import State
from simplestate.core.triggers import Trigger

OFF = State("off")
ON = State("on")
SPACE = Trigger(" ")


def build_onoff(echo: Callable[[str], None] = print) -> StateMachine:
    """
    Build the switch machine. Entry and exit actions report through ``echo``.
    """
    machine = StateMachine(OFF)
    (
        machine.configure(OFF)
        .permit(SPACE, ON)
        .on_enter(lambda: echo("entering off"))
        .on_exit(lambda: echo("exiting off"))
    )
    (
        machine.configure(ON)
        .permit(SPACE, OFF)
        .on_enter(lambda: echo("entering on"))
        .on_exit(lambda: echo("exiting on"))
    )
    return machine


def run_onoff(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> StateMachine:
    """
    Read one line at a time and fire it as a trigger key until input ends.
    Rejected keys are reported and the loop carries on.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def echo(msg: str) -> None:
        print(msg, file=stdout)

    machine = build_onoff(echo)
    while True:
        echo(f"current state: {machine.state}")
        stdout.write("Enter text (a single space toggles the state, other strings do nothing): ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            echo("")
            return machine
        try:
            machine.fire(line.rstrip("\r\n"))
        except TriggerNotPermittedError as e:
            echo(str(e))
