# Entry point for the flight record validator; see flightcsv/cli.py.
from __future__ import annotations

import sys

from flightcsv.cli import main


if __name__ == "__main__":
    sys.exit(main())
