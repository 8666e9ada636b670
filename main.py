import sys

from pmsh.shell import main

if __name__ == "__main__":
    sys.exit(main())
