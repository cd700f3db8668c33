class ParseError(ValueError):
    """Input line could not be turned into a command (bad quoting, dangling operator)."""


class ShellExit(Exception):
    """Raised by the exit builtin to stop the main loop."""

    def __init__(self, status=0):
        super().__init__(status)
        self.status = status
