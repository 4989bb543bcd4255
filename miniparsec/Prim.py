from typing import Any, Callable, Optional, Union

from .Parsec import Ok, Parser, ParserError, ParserState, Reply, T, U


def succeed(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: ParserState) -> Reply[T]:
        return state, Ok(value)
    return Parser(parse)


def fail(error: Union[ParserError, str]) -> Parser[Any]:
    """A parser that always fails with the given error, consuming nothing."""
    if isinstance(error, str):
        error = ParserError(error)

    def parse(state: ParserState) -> Reply[Any]:
        return state, error
    return Parser(parse)


def fmap(f: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    """Apply f to the result of parser. Module-level form of Parser.map."""
    return parser.map(f)


def bind(f: Callable[[T], Parser[U]], parser: Parser[T]) -> Parser[U]:
    """Run parser, then the parser f builds from its result."""
    return parser.bind(f)


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """
    Defer building a parser until it is first run.

    Recursive grammars need this: `expr` can mention `lazy(lambda: expr)`
    before `expr` is bound. The built parser is cached after the first call.
    """
    cache: Optional[Parser[T]] = None

    def parse(state: ParserState) -> Reply[T]:
        nonlocal cache
        if cache is None:
            built = thunk()
            if not isinstance(built, Parser):
                raise TypeError(f"lazy: thunk returned {type(built).__name__}, expected Parser")
            cache = built
        return cache(state)
    return Parser(parse)


def run(parser: Parser[T], input_str: str) -> Union[Ok[T], ParserError]:
    """
    Run parser over the whole input string.

    Returns Ok(value) on success. On failure returns the ParserError with its
    position set to the absolute offset where parsing stopped.
    """
    final_state, result = parser(ParserState(input_str, 0))
    if isinstance(result, ParserError):
        return ParserError(result.description, final_state.offset)
    return result
