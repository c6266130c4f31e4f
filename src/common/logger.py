import logging
import sys
import time

import colorlog
from rich.console import Console
from rich.markup import escape


if sys.platform == "win32":
    try:
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    except AttributeError:
        pass

console = Console(force_terminal=True, legacy_windows=False)

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class Logger:
    """Console logger for CLI steps and server handlers.

    Messages go through the standard ``logging`` tree (coloured by colorlog) so
    aiohttp access logs and our own lines share one format. CLI steps can also
    show a rich spinner with ``start`` and close it with ``succeed``/``fail``,
    which prints the elapsed time next to the message.
    """

    def __init__(self, name: str = "productapi"):
        self.status = None
        self.start_time: float | None = None
        self._log = logging.getLogger(name)
        self._setup_standard_logging()

    def _setup_standard_logging(self):
        if not logging.getLogger().handlers:
            handler = colorlog.StreamHandler()
            handler.setFormatter(
                colorlog.ColoredFormatter(
                    "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s: %(message)s",
                )
            )
            logging.basicConfig(level=logging.INFO, handlers=[handler])

    def set_level(self, level: str):
        self._log.setLevel(LEVELS.get(level.upper(), logging.INFO))

    def _elapsed(self) -> str | None:
        if self.start_time is None:
            return None
        elapsed = f"{time.monotonic() - self.start_time:.2f}s"
        self.start_time = None
        return elapsed

    def _stop_status(self):
        if self.status:
            try:
                self.status.__exit__(None, None, None)
            finally:
                self.status = None

    def _rich_line(self, text: str, elapsed: str | None, colour: str):
        suffix = f" [{colour}]({elapsed})[/]" if elapsed else ""
        console.print(f"[bold {colour}]{escape(text)}[/]{suffix}", soft_wrap=True)

    def start(self, text: str):
        self._stop_status()
        self.start_time = time.monotonic()
        self.status = console.status(text)
        self.status.__enter__()

    def succeed(self, text: str):
        elapsed = self._elapsed()
        self._stop_status()
        self._rich_line(f"✔ {text}", elapsed, "green")

    def fail(self, text: str):
        elapsed = self._elapsed()
        self._stop_status()
        self._rich_line(f"✖ {text}", elapsed, "red")

    def debug(self, text: str):
        self._log.debug(text)

    def info(self, text: str):
        self._log.info(text)

    def warning(self, text: str):
        self._log.warning(text)

    def error(self, text: str):
        self._log.error(text)

    def exception(self, text: str):
        self._log.exception(text)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stop_status()


# Shared instance imported across the codebase
logger = Logger()
