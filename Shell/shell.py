import sys

from config import PROMPT, SHELL_NAME
from Shell.errors import ParseError, ShellExit
from Shell.executor import execute_command
from Shell.history import init_readline, load_history, save_history
from Shell.parser import parse_command

# Global state
last_status = 0


def prompt():
    """Prompt chỉ hiện khi output là terminal"""
    return PROMPT if sys.stdout.isatty() else ""


def read_line(prompt_text):
    # input() dùng readline (và tự thêm vào history) khi chạy trong terminal
    return input(prompt_text)


def run_line(line):
    """
    One dispatch cycle: parse, execute, clean up.
    Returns: exit_code
    Raises: ShellExit from the exit builtin
    """
    try:
        args, plan = parse_command(line)
    except ParseError as e:
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
        return 2

    if not args:
        return last_status
    return execute_command(args, plan)


def main_loop(reader=read_line, history=None):
    """
    Main shell loop.
    Returns: the status the interpreter should exit with
    """
    global last_status

    if history is None:
        history = sys.stdin.isatty()
    if history:
        init_readline()
        load_history()

    status = 0
    try:
        while True:
            try:
                line = reader(prompt())
            except EOFError:
                break
            except KeyboardInterrupt:
                # Ctrl+C tại prompt: bỏ dòng hiện tại
                print()
                continue

            if not line.strip():
                continue

            try:
                last_status = run_line(line)
            except ShellExit as e:
                status = e.status
                break
    finally:
        if history:
            save_history()

    return status
