# Core
from .Parsec import Parser, ParserState, ParserError, Ok, Reply
from .Prim import run, succeed, fail, fmap, bind, lazy

# Characters
from .Char import (
    literal, take_while, take_while1, any_char,
    satisfy, char, whitespace
)

# Combinators
from .Combinators import (
    optional, repeat_exact, repeat, repeat1,
    keep_left, keep_right, pair, alternative,
    choice, between, sep_by, sep_by1, eof, traced
)
