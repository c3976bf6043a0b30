import copy
import logging
import logging.config

# Centralized logging configuration for the entire project
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "rich": {
            "format": "%(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
    },
    "handlers": {
        "console": {
            "class": "rich.logging.RichHandler",
            "level": "INFO",
            "formatter": "rich",
            "show_time": True,
            "show_level": True,
            "show_path": False,
            # Plan text contains [placeholders] that rich would read as markup
            "markup": False,
        }
    },
    "loggers": {
        # Plan generation
        "plan_requestor": {"level": "DEBUG"},
        "orchestrator": {"level": "DEBUG"},
        "common_llm_utils": {"level": "DEBUG"},
        # Surfaces
        "unified_app": {"level": "DEBUG"},
        "plan_api": {"level": "INFO"},
        "travel_planner_agent": {"level": "INFO"},
        # External libraries
        "httpx": {"level": "WARNING"},
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}

_logging_configured = False


def configure_logging(console_level: str = "INFO") -> None:
    """
    Apply the logging configuration with the given console handler level.

    Safe to call again (e.g. from a CLI --verbose flag) to change the level.
    """
    global _logging_configured
    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["console"]["level"] = console_level
    logging.config.dictConfig(config)
    _logging_configured = True


def get_logger(logger_name: str) -> logging.Logger:
    """
    Get a logger instance with the centralized configuration.

    Args:
        logger_name: Name of the logger (e.g., 'plan_requestor')

    Returns:
        Configured logger instance
    """
    if not _logging_configured:
        configure_logging()
    return logging.getLogger(logger_name)
