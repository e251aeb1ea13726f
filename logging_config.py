import logging

import config


def setup_logging(log_level: str = config.DEFAULT_LOG_LEVEL) -> None:
    """Configure console logging for the simulator."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return  # Already configured

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("Logging initialized (level=%s)", log_level)
