import logging
import sys
from environs import Env
from .log_filters import TruncatingFilter


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    debug_mode = env.bool("DEBUG", default=False)
    if debug_mode:
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Tower and link dumps can get long at DEBUG level.
    # Logger filters do not apply to child loggers, so filter at the handler.
    logging.getLogger("link_planner").setLevel(numeric_level)
    for handler in logging.root.handlers:
        handler.addFilter(TruncatingFilter(max_length=160))

    # Set the level for the matplotlib logger to INFO to reduce verbosity
    logging.getLogger("matplotlib").setLevel(logging.INFO)
    logging.getLogger("matplotlib.font_manager").setLevel(logging.INFO)
    logging.getLogger("PIL").setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
