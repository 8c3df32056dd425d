# logger_utils.py - logging setup and timing helpers

import logging
import time

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level="WARNING", console: Console = None) -> None:
    """
    Route the package loggers through a RichHandler on stderr.
    Safe to call more than once; the previous handler is replaced.
    """
    root = logging.getLogger("markov_text_generator")
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(level if isinstance(level, int) else str(level).upper())


def time_block(label, logger: logging.Logger = None):
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("build graph"):
            graph = build(tokens)
    It logs how long the block took at INFO.
    """
    return _Timer(label, logger or logging.getLogger("markov_text_generator"))


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label, logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.logger.info("%s done: %.3fs", self.label, self.elapsed)
        return False
