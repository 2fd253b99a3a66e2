"""Entry point for `python -m window_finder`."""

import sys

from window_finder.cli.commands import cli_main


if __name__ == "__main__":
    sys.exit(cli_main())
