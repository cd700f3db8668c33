import os
import signal
import subprocess
import sys
from contextlib import ExitStack, contextmanager, redirect_stderr, redirect_stdout

from config import (
    NOT_EXECUTABLE_STATUS,
    NOT_FOUND_STATUS,
    REDIRECT_FILE_MODE,
    SHELL_NAME,
)
from Shell.builtin import execute_builtin, find_executable


def open_target(redirect):
    """Mở file đích của redirection (tạo mới nếu chưa có)."""
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if redirect.append else os.O_TRUNC
    fd = os.open(redirect.path, flags, REDIRECT_FILE_MODE)
    return os.fdopen(fd, "a" if redirect.append else "w")


@contextmanager
def redirected(plan):
    """
    Apply a redirection plan for the duration of one command.
    Yields: (stdout_file, stderr_file), None for streams left alone.

    sys.stdout / sys.stderr are swapped in and restored on exit, on every
    path, and the target files are closed. Raises OSError if a target
    cannot be opened; whatever was already opened is closed first.
    """
    with ExitStack() as stack:
        out = err = None
        for redirect in plan.targets:
            if redirect is plan.stdout:
                out = stack.enter_context(open_target(redirect))
            elif redirect is plan.stderr:
                err = stack.enter_context(open_target(redirect))
            else:
                # bị ghi đè bởi redirection phía sau: chỉ tạo/truncate file
                open_target(redirect).close()

        if out is not None:
            sys.stdout.flush()
            stack.enter_context(redirect_stdout(out))
        if err is not None:
            sys.stderr.flush()
            stack.enter_context(redirect_stderr(err))
        yield out, err


@contextmanager
def interrupts_ignored():
    """Ctrl+C không giết shell trong khi chờ tiến trình con."""
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _restore_default_signals():
    # Chạy trong tiến trình con, trước exec
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGQUIT, signal.SIG_DFL)


def resolve_command(name):
    if "/" in name:
        # Popen báo lỗi nếu không chạy được (126)
        return name if os.path.exists(name) else None
    return find_executable(name)


def run_external(args, stdout=None, stderr=None):
    """
    Chạy lệnh ngoài và chờ nó kết thúc.
    Returns: exit_code
    """
    path = resolve_command(args[0])
    if path is None:
        print(f"{args[0]}: command not found", file=sys.stderr)
        return NOT_FOUND_STATUS

    sys.stdout.flush()
    sys.stderr.flush()
    with interrupts_ignored():
        try:
            proc = subprocess.Popen(
                args,
                executable=path,
                stdout=stdout,
                stderr=stderr,
                preexec_fn=_restore_default_signals,
            )
        except FileNotFoundError:
            print(f"{args[0]}: command not found", file=sys.stderr)
            return NOT_FOUND_STATUS
        except OSError as e:
            print(f"{SHELL_NAME}: {args[0]}: {e.strerror}", file=sys.stderr)
            return NOT_EXECUTABLE_STATUS

        code = proc.wait()

    if code < 0:
        # killed by signal
        return 128 - code
    return code


def execute_command(args, plan):
    """
    Run one parsed command with its redirections applied.
    Returns: exit_code
    ShellExit from the exit builtin propagates after streams are restored.
    """
    try:
        with redirected(plan) as (out, err):
            executed, code = execute_builtin(args)
            if executed:
                sys.stdout.flush()
                return code
            return run_external(args, stdout=out, stderr=err)
    except OSError as e:
        target = e.filename or args[0]
        print(f"{SHELL_NAME}: {target}: {e.strerror}", file=sys.stderr)
        return 1
