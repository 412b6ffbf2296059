from hypothesis import given, strategies as st

from pairlisp.config import Scoping
from pairlisp.reader.desugar import desugar
from pairlisp.reader.parser import parse
from pairlisp.types.environment import Environment
from pairlisp.types.values import Boolean, Number, wrap_i32
from tests.conftest import run

# Literals are unsigned in source; negative operands are built with (- 0 n).
small = st.integers(min_value=0, max_value=2**31 - 1)
i32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def lit(n: int) -> str:
    return str(n) if n >= 0 else f"(- 0 {-n})"


# -------------------------------
# Pairs
# -------------------------------
@given(i32, i32)
def test_car_cdr_recover_cons(x, y):
    env = Environment()
    assert run(f"(car (cons {lit(x)} {lit(y)}))", env) == Number(x)
    assert run(f"(cdr (cons {lit(x)} {lit(y)}))", env) == Number(y)


# -------------------------------
# Quote
# -------------------------------
quotable = st.recursive(
    st.one_of(small.map(str), st.from_regex(r"[a-z][a-z0-9]{0,4}", fullmatch=True)),
    lambda children: st.lists(children, max_size=3).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=8,
)


@given(quotable)
def test_quote_returns_desugared_form(source):
    assert run(f"'{source}", Environment()) == desugar(parse(source))


@given(small)
def test_quote_is_identity_on_numbers(n):
    assert run(f"'{n}", Environment()) == Number(n)


# -------------------------------
# if
# -------------------------------
@given(small, small)
def test_if_picks_branch(a, b):
    env = Environment()
    assert run(f"(if true {a} (/ 1 0))", env) == Number(a)
    assert run(f"(if false (/ 1 0) {b})", env) == Number(b)


# -------------------------------
# define / closures
# -------------------------------
@given(i32, st.sampled_from(list(Scoping)))
def test_define_then_reference(n, scoping):
    env = Environment()
    run(f"(define p {lit(n)})", env, scoping)
    assert run("p", env, scoping) == Number(n)


@given(i32, st.sampled_from(list(Scoping)))
def test_identity_closure(n, scoping):
    env = Environment()
    assert run(f"((lambda (n) n) {lit(n)})", env, scoping) == Number(n)
    assert env.depth == 0
    assert env.find("n") is None


# -------------------------------
# Arithmetic
# -------------------------------
@given(i32, i32)
def test_add_wraps(a, b):
    assert run(f"(+ {lit(a)} {lit(b)})", Environment()) == Number(wrap_i32(a + b))


@given(i32, i32)
def test_mul_wraps(a, b):
    assert run(f"(* {lit(a)} {lit(b)})", Environment()) == Number(wrap_i32(a * b))


@given(i32, i32.filter(lambda n: n != 0))
def test_div_rem_identity(a, b):
    env = Environment()
    q = run(f"(/ {lit(a)} {lit(b)})", env).value
    r = run(f"(rem {lit(a)} {lit(b)})", env).value
    assert wrap_i32(q * b + r) == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@given(i32, i32)
def test_comparisons_agree(a, b):
    env = Environment()
    assert run(f"(< {lit(a)} {lit(b)})", env) == Boolean(a < b)
    assert run(f"(= {lit(a)} {lit(b)})", env) == Boolean(a == b)
    assert run(f"(ge {lit(a)} {lit(b)})", env) == Boolean(a >= b)
