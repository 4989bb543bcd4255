from dataclasses import dataclass
from typing import Callable, Generic, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class ParserState:
    """Remaining input and the absolute offset consumed so far."""
    text: str
    offset: int = 0

    def advance(self, n: int) -> 'ParserState':
        """Slice off the first n characters."""
        return ParserState(self.text[n:], self.offset + n)

    def __str__(self) -> str:
        preview = self.text[:30] + ('...' if len(self.text) > 30 else '')
        return f"offset {self.offset}, remaining {preview!r}"


@dataclass(frozen=True)
class ParserError:
    """A parse failure: what was expected and where."""
    description: str
    position: int = 0

    def __str__(self) -> str:
        return f"parse error at position {self.position}: {self.description}"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse result. None is a valid value, so success is tagged."""
    value: T


Reply = Tuple[ParserState, Union[Ok[T], ParserError]]
# (state after the step, Ok(value) or ParserError)


class Parser(Generic[T]):
    """
    A parser wraps a transition function ParserState -> Reply[T].

    Parsers are immutable and meant to be shared: a combinator keeps a
    reference to its sub-parsers, so one whitespace parser can appear in many
    places of a grammar.

    Operator sugar:
        p1 | p2    alternative
        p1 & p2    pair, yields (v1, v2)
        p1 < p2    keep left value
        p1 > p2    keep right value
        p >> f     bind

    `<` and `>` are comparison operators, so Python chains them:
    `a > b < c` means `(a > b) and (b < c)` and silently builds only
    `b < c`. Parenthesize, or use the named methods for chains:

        ws > name < ws            # wrong: only `name < ws` survives
        (ws > name) < ws          # right
        ws.keep_right(name).keep_left(ws)   # same, no operators
    """
    def __init__(self, parse_fn: Callable[[ParserState], Reply[T]]):
        self.parse_fn = parse_fn

    def __call__(self, state: ParserState) -> Reply[T]:
        return self.parse_fn(state)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        def parse(state: ParserState) -> Reply[U]:
            new_state, result = self(state)
            if isinstance(result, ParserError):
                return new_state, result
            return new_state, Ok(f(result.value))
        return Parser(parse)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(state: ParserState) -> Reply[U]:
            new_state, result = self(state)
            if isinstance(result, ParserError):
                # f is never called on failure
                return new_state, result
            next_parser = f(result.value)
            return next_parser(new_state)
        return Parser(parse)

    # Alternative (<|>)
    def or_else(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(state: ParserState) -> Reply[T]:
            new_state, result = self(state)
            if isinstance(result, Ok):
                return new_state, result
            # Retry from the original state; the failed branch's consumption is dropped
            return other(state)
        return Parser(parse)

    # Sequence, keeping both values
    def pair(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        def combined(state: ParserState) -> Reply[Tuple[T, U]]:
            state1, result1 = self(state)
            if isinstance(result1, ParserError):
                return state1, result1

            state2, result2 = other(state1)
            if isinstance(result2, ParserError):
                return state2, result2

            return state2, Ok((result1.value, result2.value))
        return Parser(combined)

    # Sequence (*>)
    def keep_right(self, other: 'Parser[U]') -> 'Parser[U]':
        def combined(state: ParserState) -> Reply[U]:
            state1, result1 = self(state)  # value discarded
            if isinstance(result1, ParserError):
                return state1, result1
            return other(state1)
        return Parser(combined)

    # Sequence (<*)
    def keep_left(self, other: 'Parser[U]') -> 'Parser[T]':
        def combined(state: ParserState) -> Reply[T]:
            state1, result1 = self(state)
            if isinstance(result1, ParserError):
                return state1, result1

            state2, result2 = other(state1)  # value discarded
            if isinstance(result2, ParserError):
                return state2, result2

            return state2, result1
        return Parser(combined)

    # Label (<?>)
    def label(self, name: str) -> 'Parser[T]':
        """Replace the description of a failure with 'expected <name>'."""
        def parse(state: ParserState) -> Reply[T]:
            new_state, result = self(state)
            if isinstance(result, ParserError):
                return new_state, ParserError(f"expected {name}", result.position)
            return new_state, result
        return Parser(parse)

    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        return self.or_else(other)

    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        return self.pair(other)

    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.keep_right(other)

    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return self.keep_left(other)

    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)
