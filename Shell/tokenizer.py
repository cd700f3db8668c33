"""
Split a command line into words.

Rules:
  - whitespace outside quotes separates words
  - outside quotes, a backslash keeps the next character literally
  - '...' keeps everything literally
  - "..." keeps everything literally except \\ before " \\ $ `
  - quotes do not end a word: a'b'c -> abc
  - a backslash at the very end of the line is kept as-is
"""

from Shell.errors import ParseError

# Ký tự được escape bên trong "..."
DQUOTE_ESCAPABLE = '"\\$`'


def tokenize(line):
    """
    Tokenize one input line.
    Returns: list of words
    Raises: ParseError on an unterminated quote
    """
    tokens = []
    buf = []
    in_word = False
    quote = None
    i, n = 0, len(line)

    while i < n:
        ch = line[i]

        if quote == "'":
            if ch == "'":
                quote = None
            else:
                buf.append(ch)
            i += 1
            continue

        if quote == '"':
            if ch == '"':
                quote = None
            elif ch == "\\" and i + 1 < n and line[i + 1] in DQUOTE_ESCAPABLE:
                buf.append(line[i + 1])
                i += 1
            else:
                buf.append(ch)
            i += 1
            continue

        if ch.isspace():
            if in_word:
                tokens.append("".join(buf))
                buf = []
                in_word = False
            i += 1
            continue

        in_word = True
        if ch in ("'", '"'):
            quote = ch
        elif ch == "\\" and i + 1 < n:
            buf.append(line[i + 1])
            i += 1
        else:
            buf.append(ch)
        i += 1

    if quote is not None:
        raise ParseError(f"unexpected EOF while looking for matching `{quote}'")

    if in_word:
        tokens.append("".join(buf))
    return tokens
