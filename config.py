import os

SHELL_NAME = "minish"
PROMPT = "$ "

HISTORY_FILE = os.getenv("MINISH_HISTFILE") or os.path.expanduser("~/.minish_history")
MAX_HISTORY = 1000  # Giới hạn số lệnh lưu

# rw-r--r-- cho file tạo bởi redirection
REDIRECT_FILE_MODE = 0o644

NOT_FOUND_STATUS = 127
NOT_EXECUTABLE_STATUS = 126
