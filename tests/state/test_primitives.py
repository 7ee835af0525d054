"""
Tests for the primitive state computations.
"""

import pytest

from statesharp import get, gets, lift, modify, put, run_state
from statesharp.state.models import StateResult


def test_lift_ignores_state(initial_states):
    """Test that lift returns its value and leaves the state alone."""
    for state in initial_states:
        assert run_state(lift("hello"), state) == ("hello", state)


def test_get_returns_state(initial_states):
    """Test that get exposes the state as its result."""
    for state in initial_states:
        assert run_state(get(), state) == (state, state)


def test_put_replaces_state(initial_states):
    """Test that put installs the new state regardless of the input."""
    for state in initial_states:
        assert run_state(put(7), state) == (None, 7)


def test_gets_is_a_pure_read(initial_states):
    """Test that gets projects the state without changing it."""
    for state in initial_states:
        assert run_state(gets(lambda s: s * 10), state) == (state * 10, state)


def test_modify_transforms_state(initial_states):
    """Test that modify applies its function to the state."""
    for state in initial_states:
        assert run_state(modify(lambda s: s - 3), state) == (None, state - 3)


def test_modify_composition(initial_states):
    """Test that consecutive modifies compose their functions in order."""
    f = lambda s: s + 2
    g = lambda s: s * 5
    program = modify(f) >> (lambda _: modify(g))
    for state in initial_states:
        assert run_state(program, state).state == g(f(state))


def test_put_then_get_round_trip(initial_states):
    """Test that reading after writing yields the written state."""
    program = put("written") >> (lambda _: get())
    for state in initial_states:
        assert run_state(program, state) == ("written", "written")


def test_put_then_gets_scenario():
    """Test writing 10 and then reading double the state."""
    program = put(10) >> (lambda _: gets(lambda x: x * 2))
    result = run_state(program, 0)
    assert result.value == 20
    assert result.state == 10


def test_primitives_do_not_mutate_state():
    """Test that an input state object is left untouched."""
    original = {"count": 1}
    program = modify(lambda s: {**s, "count": s["count"] + 1})
    result = run_state(program, original)
    assert original == {"count": 1}
    assert result.state == {"count": 2}


def test_result_is_state_result():
    """Test that running a computation yields a named pair."""
    result = get()(5)
    assert isinstance(result, StateResult)
    value, state = result
    assert (value, state) == (5, 5)


def test_user_function_errors_propagate():
    """Test that exceptions from caller functions are not wrapped."""
    with pytest.raises(ZeroDivisionError):
        run_state(gets(lambda s: 1 / s), 0)
    with pytest.raises(KeyError):
        run_state(modify(lambda s: s["missing"]), {})
