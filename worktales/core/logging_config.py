# worktales/core/logging_config.py
import logging


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # the driver is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
