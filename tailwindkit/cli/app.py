"""
tailwindkit command-line entry point.

The launcher defines no options of its own: every argument is forwarded
to tailwindcss unchanged. Behaviour is controlled through environment
variables and an optional ``tailwindkit.yaml`` (see ``tailwindkit.core.config``).
"""

import logging
import sys
from typing import List, Optional

from tailwindkit.cli.launcher import Launcher
from tailwindkit.core.config import load_config
from tailwindkit.core.exceptions import ConfigurationError, TailwindKitError
from tailwindkit.core.platform import detect_host

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def configure_logging(debug: bool):
    """
    Configure logging for the launcher.

    Args:
        debug: Log everything, with logger names; otherwise errors only
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    else:
        level = logging.ERROR
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        force=True,  # Reconfigure if already configured
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run tailwindcss with the given arguments.

    Args:
        argv: Arguments for tailwindcss (defaults to sys.argv[1:])

    Returns:
        Exit code: tailwindcss's own, or 1 if it could not be found,
        downloaded or started
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = load_config()
    except ConfigurationError as e:
        configure_logging(debug=False)
        logger.error(f"{e}")
        return EXIT_FAILURE

    configure_logging(config.debug)

    host = detect_host()
    logger.debug(f"Host: {host.system}/{host.machine} -> {host.platform}")

    try:
        return Launcher(host, config).run(list(argv))
    except TailwindKitError as e:
        logger.error(f"unable to find or download tailwindcss: {e}")
        if config.debug:
            import traceback

            traceback.print_exc()
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
