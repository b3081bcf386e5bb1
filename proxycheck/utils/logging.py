import logging
import sys

FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"

# Connection-pool chatter stays at INFO even when the harness runs at DEBUG.
LIBRARY_LOGGERS = ("urllib3", "charset_normalizer")


def setup_logging(level: str = "INFO") -> None:
    """
    Send harness logs to stdout next to the command output.
    Python warnings (TLS, deprecations) are routed through the same handler.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.INFO))
    logging.captureWarnings(True)
