import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("cipher_machine").setLevel(level)
