# main.py - runs the console front end

import sys

from avl_autocompleter.cli import main

if __name__ == "__main__":
    sys.exit(main())
