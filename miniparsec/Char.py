from typing import Callable

from .Parsec import Ok, Parser, ParserError, ParserState, Reply
from .Prim import fail, succeed


# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool], expected: str = "matching char") -> Parser[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    def parse(state: ParserState) -> Reply[str]:
        if state.text and f(state.text[0]):
            return state.advance(1), Ok(state.text[0])
        return state, ParserError(f"expected {expected}")
    return Parser(parse)


# Helper function: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c, repr(c))


def any_char() -> Parser[str]:
    """Parses any character and returns it."""
    def parse(state: ParserState) -> Reply[str]:
        n = len(state.text)
        if n >= 1:
            return state.advance(1), Ok(state.text[0])
        return state, ParserError(f"expected any char, got none (input.len() = {n})")
    return Parser(parse)


def literal(expected: str) -> Parser[str]:
    """
    Parses the exact string `expected` and returns it.

    Consumes only on a full match. Input shorter than `expected` is an
    ordinary mismatch.
    """
    size = len(expected)

    def parse(state: ParserState) -> Reply[str]:
        if state.text.startswith(expected):
            return state.advance(size), Ok(expected)
        return state, ParserError(f"expected {expected}")
    return Parser(parse)


def take_while(f: Callable[[str], bool]) -> Parser[str]:
    """
    Consumes the longest prefix whose characters all satisfy f.

    Never fails: an empty prefix is a valid match.
    """
    def parse(state: ParserState) -> Reply[str]:
        text = state.text
        i = 0
        while i < len(text) and f(text[i]):
            i += 1
        return state.advance(i), Ok(text[:i])
    return Parser(parse)


def take_while1(f: Callable[[str], bool], expected: str) -> Parser[str]:
    """Like take_while, but at least one character must match."""
    def check(matched: str) -> Parser[str]:
        if matched:
            return succeed(matched)
        return fail(f"expected {expected}")
    return take_while(f).bind(check)


def whitespace() -> Parser[str]:
    """Skips zero or more whitespace characters, returning them."""
    return take_while(str.isspace)
