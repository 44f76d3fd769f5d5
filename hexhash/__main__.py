"""Run the command line interface: python -m hexhash."""

import sys

from hexhash.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
