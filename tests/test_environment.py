import pytest

from pairlisp import errors
from pairlisp.types.environment import Environment
from pairlisp.types.values import Number


def test_define_and_lookup(env):
    env.define("x", Number(1))
    assert env.lookup("x") == Number(1)


def test_lookup_missing(env):
    with pytest.raises(errors.SymbolNotFoundError) as exc:
        env.lookup("nope", (3, 7))
    assert exc.value.name == "nope"
    assert exc.value.span == (3, 7)


def test_define_overwrites(env):
    env.define("x", Number(1))
    env.define("x", Number(2))
    assert env.lookup("x") == Number(2)


def test_enclose_shadows_and_disclose_restores(env):
    env.define("x", Number(1))
    env.enclose()
    assert env.depth == 1
    assert env.lookup("x") == Number(1)
    env.define("x", Number(2))
    env.define("y", Number(3))
    assert env.lookup("x") == Number(2)
    env.disclose()
    assert env.depth == 0
    assert env.lookup("x") == Number(1)
    assert env.find("y") is None


def test_nested_scopes(env):
    env.define("a", Number(1))
    env.enclose()
    env.define("b", Number(2))
    env.enclose()
    env.define("c", Number(3))
    assert [env.lookup(n) for n in "abc"] == [Number(1), Number(2), Number(3)]
    env.disclose()
    assert env.find("c") is None
    assert env.lookup("b") == Number(2)


def test_enclose_on_captured_chain(env):
    env.define("g", Number(0))
    env.enclose()
    env.define("local", Number(1))
    captured = env.snapshot()
    env.disclose()

    env.enclose()
    env.define("other", Number(2))
    env.enclose(captured)
    assert env.lookup("local") == Number(1)
    assert env.find("other") is None
    env.disclose()
    assert env.lookup("other") == Number(2)
    env.disclose()
    assert env.depth == 0


def test_snapshot_shares_frames(env):
    captured = env.snapshot()
    env.define("late", Number(9))
    env.enclose(captured)
    assert env.lookup("late") == Number(9)
    env.disclose()


def test_disclose_without_enclose_is_a_contract_violation(env):
    with pytest.raises(RuntimeError):
        env.disclose()
    env.enclose()
    env.disclose()
    with pytest.raises(RuntimeError):
        env.disclose()


def test_reset_drops_call_frames(env):
    env.define("g", Number(1))
    env.enclose()
    env.enclose()
    env.reset()
    assert env.depth == 0
    assert len(env.frames) == 1
    assert env.lookup("g") == Number(1)


def test_str_and_repr():
    env = Environment()
    env.define("x", Number(1))
    assert str(env) == "{x: 1}"
    env.enclose()
    env.define("y", Number(2))
    assert str(env) == "{y: 2} -> ..."
    assert repr(env) == "<Environment chain: {y: 2} -> {x: 1}>"
