from dataclasses import dataclass
from typing import Optional

from Shell.errors import ParseError
from Shell.tokenizer import tokenize

# operator -> (stream, append)
REDIRECT_OPERATORS = {
    ">": ("stdout", False),
    "1>": ("stdout", False),
    ">>": ("stdout", True),
    "1>>": ("stdout", True),
    "2>": ("stderr", False),
    "2>>": ("stderr", True),
}


@dataclass(frozen=True)
class Redirect:
    path: str
    append: bool = False

    @property
    def mode(self):
        return "append" if self.append else "truncate"


@dataclass
class RedirectionPlan:
    stdout: Optional[Redirect] = None
    stderr: Optional[Redirect] = None
    # Tất cả target theo thứ tự xuất hiện, kể cả target bị ghi đè
    targets: tuple = ()

    def __bool__(self):
        return self.stdout is not None or self.stderr is not None


def extract_redirections(tokens):
    """
    Tách các toán tử redirection ra khỏi danh sách token.
    Returns: (args: list, plan: RedirectionPlan)
    Raises: ParseError nếu toán tử không có file đích
    """
    args = tokens[:1]
    plan = RedirectionPlan()
    targets = []
    i = 1

    while i < len(tokens):
        tok = tokens[i]
        if tok not in REDIRECT_OPERATORS:
            args.append(tok)
            i += 1
            continue

        if i + 1 >= len(tokens):
            raise ParseError("syntax error near unexpected token `newline'")

        stream, append = REDIRECT_OPERATORS[tok]
        redirect = Redirect(tokens[i + 1], append)
        targets.append(redirect)
        # rightmost wins
        setattr(plan, stream, redirect)
        i += 2

    plan.targets = tuple(targets)
    return args, plan


def parse_command(line):
    """
    Parse a command line into an argument vector and a redirection plan.
    Returns: (args, plan); args is empty for a blank line
    Raises: ParseError
    """
    tokens = tokenize(line)
    if not tokens:
        return [], RedirectionPlan()
    return extract_redirections(tokens)
