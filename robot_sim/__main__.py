#!/usr/bin/env python3
"""
robot_sim command line.

Reads robot commands from a file (or stdin) and prints REPORT output.

    python -m robot_sim commands.txt
    printf 'PLACE 0,0,NORTH\\nMOVE\\nREPORT\\n' | python -m robot_sim
"""
import logging
import sys
from pathlib import Path

import click

from robot_sim.config import LOG_DATE_FORMAT, LOG_FORMAT
from robot_sim.engine.reporter import EchoReporter
from robot_sim.engine.simulation import run_simulation

HANDLER_PREFIX = "robot_sim."


def teardown_logging() -> None:
    """Remove and close the handlers installed by setup_logging."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure logging to stderr and, optionally, a file.

    Handlers from an earlier call are replaced, not stacked.
    """
    teardown_logging()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Console handler - stderr so it never mixes with REPORT output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    # File handler - always verbose
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


@click.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--debug", is_flag=True, help="Log every command to stderr")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a debug log to this file",
)
def main(input_file, debug: bool, log_file: Path | None):
    """Run robot commands from INPUT_FILE (default: stdin)."""
    setup_logging(debug=debug, log_file=log_file)

    logger = logging.getLogger(__name__)
    logger.debug("Reading commands from %s", input_file.name)

    try:
        final = run_simulation(input_file, reporter=EchoReporter())
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    else:
        logger.debug("Final state: %s", final)
    finally:
        teardown_logging()


if __name__ == "__main__":
    main()
