"""dapcs command line, ``python -m dapcs``.

Usage::

    python -m dapcs resolve --cwd path/to/solution
    python -m dapcs --netcoredbg /opt/netcoredbg/netcoredbg adapter
"""

import sys

from dapcs.cli import main

if __name__ == "__main__":
    sys.exit(main())
