"""Main CLI entry point for multisum.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import sys

from multisum.cli import CLIRunner
from multisum.constants import EXIT_FAILURE, EXIT_INTERRUPTED
from multisum.logger import get_logger

logger = get_logger(__name__)


def _use_surrogate_escapes() -> None:
    """Let file names that are not valid UTF-8 pass through stdio."""
    for stream in (sys.stdin, sys.stdout):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main() -> None:
    """Run the CLI application and exit with its status.

    Raises:
        SystemExit: Always, carrying the process exit code.

    """
    _use_surrogate_escapes()
    try:
        exit_code = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(EXIT_FAILURE)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
