import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    # Re-running the app factory (tests, reloads) must not stack handlers.
    if any(getattr(handler, "_payu_bridge", False) for handler in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._payu_bridge = True  # type: ignore[attr-defined]
    root.addHandler(handler)
