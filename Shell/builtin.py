import os
import re
import shutil
import sys

from Shell.errors import ShellExit


def find_executable(name):
    """Tìm file thực thi đầu tiên tên `name` trong $PATH (theo thứ tự)."""
    return shutil.which(name, path=os.environ.get("PATH", ""))


def builtin_echo(args):
    print(" ".join(args))
    return 0


def builtin_exit(args):
    """Exit the shell with status args[0] (atoi-style, default 0)"""
    status = 0
    if args:
        m = re.match(r"\s*([+-]?)([0-9]+)", args[0])
        if m:
            # 10**8 chia hết cho 256: 9 chữ số cuối là đủ
            status = int(m.group(2)[-9:])
            if m.group(1) == "-":
                status = -status
    raise ShellExit(status & 0xFF)


def builtin_type(args):
    """Show whether each name is a builtin or where it lives on PATH"""
    if not args:
        print("type: missing argument")
        return 1

    code = 0
    for name in args:
        if name in BUILTINS:
            print(f"{name} is a shell builtin")
            continue
        path = find_executable(name)
        if path:
            print(f"{name} is {path}")
        else:
            print(f"{name}: not found")
            code = 1
    return code


def builtin_pwd(args):
    try:
        print(os.getcwd())
        return 0
    except OSError as e:
        print(f"pwd: {e.strerror}", file=sys.stderr)
        return 1


def builtin_cd(args):
    """Change directory"""
    home = os.environ.get("HOME")
    if args:
        target = args[0]
        if target.startswith("~"):
            target = (home or "/") + target[1:]
    else:
        target = home

    if not target:
        print("cd: HOME not set", file=sys.stderr)
        return 1

    try:
        os.chdir(target)
        return 0
    except OSError as e:
        print(f"cd: {target}: {e.strerror}", file=sys.stderr)
        return 1


BUILTINS = {
    "echo": builtin_echo,
    "exit": builtin_exit,
    "type": builtin_type,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
}


def execute_builtin(args):
    """
    Execute built-in command if it matches.
    Returns (executed: bool, exit_code: int)
    """
    handler = BUILTINS.get(args[0]) if args else None
    if handler is None:
        return False, 0
    return True, handler(args[1:])
