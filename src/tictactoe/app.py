"""Application entry point."""

from __future__ import annotations

import sys


def main() -> None:
    """Launch the tic-tac-toe application."""
    from tictactoe.ui.bootstrap import configure_logging, run_application
    from tictactoe.ui.settings import AppSettings

    settings = AppSettings()
    configure_logging(settings.log_level)
    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
