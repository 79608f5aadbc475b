"""Root logger setup for applications embedding the audio client.

Called by AudioClient.from_env(setup_logging=True); a host application with
its own logging config leaves it off.
"""
import logging

from rich.logging import RichHandler

# httpx logs every request at INFO; only surface it when debugging
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str) -> None:
    resolved = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(resolved)
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    noisy_level = resolved if resolved <= logging.DEBUG else max(resolved, logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
