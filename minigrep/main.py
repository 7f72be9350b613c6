import os
import sys
import logging
from typing import Optional, Sequence

from minigrep.settings import load_settings
from minigrep.core.config import Config
from minigrep.core.errors import ConfigError, FileReadError
from minigrep.core.runner import run

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # Log records go to stderr so they never interleave with matches.
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def silence_stdout() -> None:
    """
    Points the stdout file descriptor at os.devnull so the interpreter's
    final flush does not hit the closed pipe again.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    # Argument errors are reported before any settings file is touched.
    try:
        config = Config.build(argv)
    except ConfigError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    settings = load_settings()
    if settings["status"] == "ERROR":
        print(f"Settings error: {settings['error']}", file=sys.stderr)
        return 1
    data = settings["data"]
    configure_logging(data["logging"]["level"])
    logger.debug(f"Settings source: {settings['source']} ({settings['config_path']})")

    try:
        run(config, settings=data)
    except FileReadError as e:
        logger.debug("Read failure", exc_info=e.cause)
        print(f"Application error: {e}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        # Consumer (e.g. `head`) went away; stop quietly.
        silence_stdout()
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
