# tests/test_laws.py
from hypothesis import given, strategies as st

from miniparsec.Char import any_char
from miniparsec.Parsec import ParserState
from miniparsec.Prim import succeed

# Strategy to generate arbitrary values
vals = st.integers() | st.text()


def run_p(p, input_str=""):
    """Helper to run a parser on a fresh state, returning the raw reply"""
    return p(ParserState(input_str, 0))


# 1. Left Identity: return a >>= f  === f a
@given(vals, st.text())
def test_monad_left_identity(v, text):
    f = lambda x: any_char().map(lambda c: (x, c))

    lhs = succeed(v).bind(f)
    rhs = f(v)

    assert run_p(lhs, text) == run_p(rhs, text)


# 2. Right Identity: m >>= return === m
@given(st.text())
def test_monad_right_identity(text):
    m = any_char()

    lhs = m.bind(succeed)
    rhs = m

    assert run_p(lhs, text) == run_p(rhs, text)


# 3. Associativity: (m >>= f) >>= g === m >>= (\x -> f x >>= g)
@given(st.integers(), st.text())
def test_monad_associativity(v, text):
    m = succeed(v)
    f = lambda x: any_char().map(lambda _: x + 1)
    g = lambda y: succeed(y * 2)

    lhs = m.bind(f).bind(g)
    rhs = m.bind(lambda x: f(x).bind(g))

    assert run_p(lhs, text) == run_p(rhs, text)


# 4. Functor identity: map id === id
@given(st.text())
def test_functor_identity(text):
    m = any_char()
    assert run_p(m.map(lambda x: x), text) == run_p(m, text)
