# tests/unit/test_state_config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

from simplestate.core.state_machine import StateMachine
from simplestate.core.states import State


def test_configure_returns_same_config(s1, s2, tr1):
    sm = StateMachine(s1)
    first = sm.configure(s2)
    second = sm.configure(s2)
    assert first is second

    first.permit(tr1, s1)
    assert second.edge_for("tr1").target == s1


def test_configuration_methods_chain(s1, s2, s3, tr1, tr2):
    sm = StateMachine(s1)
    cfg = sm.configure(s2)
    assert cfg.permit(tr1, s1) is cfg
    assert cfg.permit_if(tr2, s3, lambda: True) is cfg
    assert cfg.on_enter(lambda: None) is cfg
    assert cfg.on_exit(lambda: None) is cfg
    assert cfg.on_enter_from(tr1, lambda ctx: None) is cfg
    assert cfg.substate_of(s1) is cfg


def test_permit_registers_target(s1, tr1):
    sm = StateMachine(s1)
    target = State("elsewhere")
    assert target not in sm.registry

    sm.configure(s1).permit(tr1, target)
    assert target in sm.registry


def test_permit_overwrites_edge_and_guards(s1, s2, s3, tr1):
    sm = StateMachine(s1)
    cfg = sm.configure(s1)
    cfg.permit_if(tr1, s2, lambda: False)
    cfg.permit(tr1, s3)

    edge = cfg.edge_for("tr1")
    assert edge.target == s3
    assert not edge.is_guarded


def test_permit_if_creates_guarded_edge(s1, s2, tr1):
    sm = StateMachine(s1)
    guard = MagicMock(return_value=True)
    sm.configure(s1).permit_if(tr1, s2, guard)

    edge = sm.configure(s1).edge_for("tr1")
    assert edge.target == s2
    assert edge.guards == [guard]


def test_permit_if_appends_guard_and_keeps_first_target(s1, s2, s3, tr1):
    sm = StateMachine(s1)
    first = MagicMock(return_value=False)
    second = MagicMock(return_value=True)
    cfg = sm.configure(s1)
    cfg.permit_if(tr1, s2, first)
    cfg.permit_if(tr1, s3, second)

    edge = cfg.edge_for("tr1")
    assert edge.target == s2
    assert edge.guards == [first, second]
    # s3 is still registered even though the edge does not point at it
    assert s3 in sm.registry


def test_permit_if_after_permit_adds_guard(s1, s2, tr1):
    sm = StateMachine(s1)
    cfg = sm.configure(s1)
    cfg.permit(tr1, s2)
    cfg.permit_if(tr1, s2, lambda: False)
    assert cfg.edge_for("tr1").is_guarded


def test_hooks_are_replaced_not_accumulated(s1):
    sm = StateMachine(s1)
    first = MagicMock()
    second = MagicMock()
    cfg = sm.configure(s1)
    cfg.on_enter(first).on_enter(second)
    cfg.on_exit(first).on_exit(second)

    assert cfg.enter_action is second
    assert cfg.exit_action is second


def test_on_enter_from_is_keyed_by_trigger(s1, tr1, tr2):
    sm = StateMachine(s1)
    first = MagicMock()
    second = MagicMock()
    cfg = sm.configure(s1)
    cfg.on_enter_from(tr1, first).on_enter_from(tr1, second)

    assert cfg.enter_from_action("tr1") is second
    assert cfg.enter_from_action("tr2") is None


def test_substate_of_registers_and_replaces_parent(s1, s2, s3):
    sm = StateMachine(s1)
    cfg = sm.configure(s3)
    cfg.substate_of(s2)
    assert s2 in sm.registry
    assert cfg.parent == s2

    cfg.substate_of(s1)
    assert cfg.parent == s1


def test_unconfigured_state_has_empty_config(s1, s2):
    sm = StateMachine(s1)
    cfg = sm.configure(s2)
    assert cfg.state == s2
    assert cfg.parent is None
    assert cfg.enter_action is None
    assert cfg.exit_action is None
    assert cfg.edge_for("anything") is None
