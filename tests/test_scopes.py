import pytest

from minicir.irtypes import IntegerType
from minicir.scopes import ScopeStack
from minicir.variables import GlobalVariable, LocalVariable


def _var(name, level=1):
    return LocalVariable(IntegerType.get_int(), name, level)


def test_levels_follow_enter_and_leave():
    stack = ScopeStack()
    assert stack.current_level() == -1
    stack.enter_scope()
    stack.enter_scope()
    assert stack.current_level() == 1
    stack.leave_scope()
    assert stack.current_level() == 0


def test_find_current_scope_only_looks_at_top():
    stack = ScopeStack()
    stack.enter_scope()
    outer = GlobalVariable(IntegerType.get_int(), "x")
    stack.insert_value(outer)
    stack.enter_scope()
    assert stack.find_current_scope("x") is None
    assert stack.find_all_scopes("x") is outer


def test_inner_shadows_outer_and_restores():
    stack = ScopeStack()
    stack.enter_scope()
    outer = _var("a", 0)
    stack.insert_value(outer)
    stack.enter_scope()
    inner = _var("a", 1)
    stack.insert_value(inner)
    assert stack.find_all_scopes("a") is inner
    stack.leave_scope()
    assert stack.find_all_scopes("a") is outer


def test_insert_keeps_first_value_for_name():
    stack = ScopeStack()
    stack.enter_scope()
    first, second = _var("b"), _var("b")
    stack.insert_value(first)
    stack.insert_value(second)
    assert stack.find_current_scope("b") is first


def test_missing_name_returns_none():
    stack = ScopeStack()
    stack.enter_scope()
    assert stack.find_all_scopes("nope") is None


def test_errors_without_scope():
    stack = ScopeStack()
    with pytest.raises(IndexError):
        stack.leave_scope()
    with pytest.raises(IndexError):
        stack.insert_value(_var("c"))
    with pytest.raises(IndexError):
        stack.find_current_scope("c")