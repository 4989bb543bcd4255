from miniparsec import run, take_while, take_while1, literal, optional, repeat, eof, char

# 1. Lexical pieces
# Only spaces and tabs separate tokens on a line; a newline ends an entry.
ws = take_while(lambda c: c in " \t")
name = take_while1(lambda c: c.isalnum() or c in "_.-", "name")
newline = char("\n")

# Values run to the end of the line, surrounding blanks are trimmed.
value = take_while(lambda c: c != "\n").map(str.strip)

# Comments start with '#' or ';' and run to the end of the line.
comment = (literal("#") | literal(";")) > take_while(lambda c: c != "\n")

# 2. Grammar
# entry: name '=' value
entry = ((ws > name) < (ws < literal("="))) & value

# A line body is an entry, a comment or nothing; only entries yield a value.
line_body = ws > optional(entry | comment.map(lambda _: None))

# Every line but the last must end in a newline, so repeat() always makes progress.
line = line_body < newline


def _collect(parts):
    lines, last = parts
    return {kv[0]: kv[1] for kv in lines + [last] if kv is not None}


document = ((repeat(line) & line_body) < eof()).map(_collect)


def parse_key_values(text: str):
    """Parse `key = value` lines into a dict, or return the ParserError."""
    return run(document, text)


if __name__ == "__main__":
    import sys

    result = parse_key_values(sys.stdin.read())
    print(result)
