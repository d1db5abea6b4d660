"""
=============================================================================
CLI ENTRY POINT
=============================================================================

    python -m minihttp                    # serve on 0.0.0.0:4221
    python -m minihttp --log-level DEBUG  # trace every line read

The address and the routes are fixed. The only options control how much
the server logs.

Exit status is 1 if the port cannot be bound.

=============================================================================
"""

import argparse
import logging
import sys

from . import __version__
from .config import ServerConfig
from .server import create_app


logger = logging.getLogger("minihttp")


def main(argv=None):
    """Parse arguments, build the server, run it until interrupted."""
    parser = argparse.ArgumentParser(
        prog="minihttp",
        description="Minimal HTTP/1.1 server listening on 0.0.0.0:4221",
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"minihttp {__version__}",
    )

    args = parser.parse_args(argv)

    server = create_app(ServerConfig(log_level=args.log_level))

    try:
        server.run()
    except OSError as e:
        # Bind failure; already logged by the socket server
        logger.critical(f"Cannot start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
