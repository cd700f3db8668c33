import sys

from Shell.shell import main_loop


def main():
    # Byte không hợp lệ UTF-8 vẫn đi qua được tới lệnh con (os.fsencode)
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        stream.reconfigure(errors="surrogateescape")
    sys.exit(main_loop())


if __name__ == "__main__":
    main()
