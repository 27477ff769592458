"""Colored console loggers for the ytt package."""

import logging
from typing import Optional

import colorlog

from ytt.config import Config

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

LOG_FORMAT = "%(log_color)s%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _qualify(name: str) -> str:
    if name == "ytt" or name.startswith("ytt."):
        return name
    return f"ytt.{name}"


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.
    
    Calling this again for the same name replaces the handler instead of
    adding a second one.
    
    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        
    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()
    logger = logging.getLogger(_qualify(name))
    level = LOG_LEVELS.get(log_level, logging.INFO)
    logger.setLevel(level)
    logger.propagate = False
    
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(
        LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
    ))
    logger.addHandler(console_handler)
    
    if log_level not in LOG_LEVELS:
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")
    
    return logger


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """Get a package logger, defaulting to Config.LOG_LEVEL."""
    if log_level is None:
        log_level = Config.LOG_LEVEL
    return setup_logger(name, log_level)


def set_level(log_level: str) -> None:
    """Change the level of every ytt logger configured so far."""
    level = LOG_LEVELS.get(log_level.upper(), logging.INFO)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (name == "ytt" or name.startswith("ytt.")):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
