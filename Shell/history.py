import glob
import os
import readline
import sys

from config import HISTORY_FILE, MAX_HISTORY
from Shell.builtin import BUILTINS

READLINE_BINDINGS = ("tab: complete", "set editing-mode emacs")


def path_executables():
    """Tên các file thực thi trong $PATH"""
    names = set()
    for d in os.environ.get("PATH", "").split(os.pathsep):
        if not d or not os.path.isdir(d):
            continue
        try:
            entries = os.listdir(d)
        except OSError:
            continue
        for entry in entries:
            full = os.path.join(d, entry)
            if os.path.isfile(full) and os.access(full, os.X_OK):
                names.add(entry)
    return names


def complete_command(text):
    pool = set(BUILTINS) | path_executables()
    return sorted(name + " " for name in pool if name.startswith(text))


def complete_path(text):
    matches = []
    for m in sorted(glob.glob(os.path.expanduser(text) + "*")):
        if text.startswith("~"):
            m = "~" + m[len(os.path.expanduser("~")):]
        matches.append(m + "/" if os.path.isdir(os.path.expanduser(m)) else m + " ")
    return matches


def completer(text, state):
    """Tab: từ đầu tiên -> lệnh, các từ sau -> đường dẫn"""
    before = readline.get_line_buffer()[:readline.get_begidx()]
    if before.strip():
        candidates = complete_path(text)
    else:
        candidates = complete_command(text)
    return candidates[state] if state < len(candidates) else None


def init_readline():
    """Tab completion + emacs editing; chỉ khi chạy trong terminal"""
    if not sys.stdin.isatty():
        return
    try:
        readline.set_completer(completer)
        readline.set_completer_delims(" \t\n><")
        for binding in READLINE_BINDINGS:
            readline.parse_and_bind(binding)
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def save_history():
    """Lưu history ra file"""
    try:
        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(HISTORY_FILE)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def load_history():
    """Load history từ file"""
    try:
        if os.path.exists(HISTORY_FILE):
            readline.read_history_file(HISTORY_FILE)
            readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)
