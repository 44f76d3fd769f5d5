"""Run the hexhash command line without installing it.

Just run: uv run python main.py hash -a md5 0x616263
"""

import sys

from hexhash.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
