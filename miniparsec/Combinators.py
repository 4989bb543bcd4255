import logging
from typing import Any, List, Optional, Sequence, Tuple

from .Parsec import Ok, Parser, ParserError, ParserState, Reply, T, U
from .Prim import fail, succeed

log = logging.getLogger("miniparsec")


# 1. optional: Tries a parser, returning Optional[T]
def optional(p: Parser[T]) -> Parser[Optional[T]]:
    """
    Tries parser p; returns its value if successful, else None.

    On failure the state is whatever p left, which for primitives is the
    state before p ran.
    """
    def parse(state: ParserState) -> Reply[Optional[T]]:
        new_state, result = p(state)
        if isinstance(result, ParserError):
            return new_state, Ok(None)
        return new_state, result
    return Parser(parse)


# 2. repeat_exact: Parses n occurrences of a parser
def repeat_exact(n: int, p: Parser[T]) -> Parser[List[T]]:
    """
    Applies p exactly n times, returning the list of results.

    The first failing attempt fails the whole parser; the returned state keeps
    the consumption of the attempts that succeeded before it.
    """
    def parse(state: ParserState) -> Reply[List[T]]:
        results: List[T] = []
        current_state = state
        for _ in range(n):
            current_state, result = p(current_state)
            if isinstance(result, ParserError):
                return current_state, result
            results.append(result.value)
        return current_state, Ok(results)
    return Parser(parse)


# 3. repeat: Applies a parser zero or more times
def repeat(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies p until it fails, returning the list of results.

    Always succeeds when p eventually fails; the failed attempt's consumption
    is discarded. A p that succeeds without consuming input would loop
    forever, so that case fails instead.
    """
    def parse(state: ParserState) -> Reply[List[T]]:
        results: List[T] = []
        current_state = state
        while True:
            next_state, result = p(current_state)
            if isinstance(result, ParserError):
                return current_state, Ok(results)
            if next_state.offset == current_state.offset:
                return current_state, ParserError("repeat: parser succeeded without consuming input")
            results.append(result.value)
            current_state = next_state
    return Parser(parse)


# 4. repeat1: Applies a parser one or more times
def repeat1(p: Parser[T]) -> Parser[List[T]]:
    """Applies p one or more times, returning a list of results."""
    return p.bind(lambda x: repeat(p).map(lambda xs: [x] + xs))


# 5. Sequencing, module-level forms of the Parser methods
def keep_left(p1: Parser[T], p2: Parser[Any]) -> Parser[T]:
    """Runs p1 then p2, returning p1's value."""
    return p1.keep_left(p2)


def keep_right(p1: Parser[Any], p2: Parser[U]) -> Parser[U]:
    """Runs p1 then p2, returning p2's value."""
    return p1.keep_right(p2)


def pair(p1: Parser[T], p2: Parser[U]) -> Parser[Tuple[T, U]]:
    """Runs p1 then p2, returning both values as a tuple."""
    return p1.pair(p2)


# 6. alternative: Tries p2 from the original state if p1 fails
def alternative(p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    return p1.or_else(p2)


# 7. choice: Tries parsers in order until one succeeds
def choice(parsers: Sequence[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or the last error if none do.
    """
    if not parsers:
        return fail("no alternatives")
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result


# 8. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """Parses 'open', then 'p', then 'close', returning the result of 'p'."""
    return (open > p) < close


# 9. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return p.bind(lambda x: repeat(sep > p).map(lambda xs: [x] + xs))


# 10. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return sep_by1(p, sep) | succeed([])


# 11. eof: Succeeds only at the end of input
def eof() -> Parser[None]:
    def parse(state: ParserState) -> Reply[None]:
        if state.text:
            return state, ParserError("expected end of input")
        return state, Ok(None)
    return Parser(parse)


# 12. traced: Logs entry, success and failure of a parser at DEBUG level
def traced(name: str, p: Parser[T]) -> Parser[T]:
    """
    Wraps p so every attempt is logged to the "miniparsec" logger.

    Enable with logging.basicConfig(level=logging.DEBUG).
    """
    def parse(state: ParserState) -> Reply[T]:
        log.debug("trying %s at %s", name, state)
        new_state, result = p(state)
        if isinstance(result, ParserError):
            log.debug("%s failed at offset %d: %s", name, new_state.offset, result.description)
        else:
            log.debug("%s matched %r, now at offset %d", name, result.value, new_state.offset)
        return new_state, result
    return Parser(parse)
