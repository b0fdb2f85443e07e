import sys

from xsh.shell import main

if __name__ == "__main__":
    sys.exit(main())
