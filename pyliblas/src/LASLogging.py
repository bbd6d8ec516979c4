#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import logging
import threading

import coloredlogs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setupLogging(level=None):
    """
    Install coloured console logging on the root logger.

    The level is taken from the argument, then from the PYLIBLAS_LOG_LEVEL
    environment variable, and defaults to INFO.
    """
    if level is None:
        level = os.environ.get("PYLIBLAS_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()
    coloredlogs.install(level=level, fmt=LOG_FORMAT)
    return logging.getLogger("LAS")


class LASLogger:
    """Registry of per-class loggers, named LAS.<ClassName>."""

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with LASLogger._lock:
            if class_name not in LASLogger._loggers:
                LASLogger._loggers[class_name] = logging.getLogger(f"LAS.{class_name}")
            return LASLogger._loggers[class_name]


# Decorator attaching a class logger and the usual helper methods
def LAS_LOGGER(cls):
    """Decorator to add logger functionality to a class."""
    cls.logger = LASLogger.getLogger(cls.__name__)

    cls.debug = lambda self, msg, *args, **kwargs: cls.logger.debug(
        msg, *args, **kwargs
    )
    cls.info = lambda self, msg, *args, **kwargs: cls.logger.info(msg, *args, **kwargs)
    cls.warning = lambda self, msg, *args, **kwargs: cls.logger.warning(
        msg, *args, **kwargs
    )
    cls.error = lambda self, msg, *args, **kwargs: cls.logger.error(
        msg, *args, **kwargs
    )
    cls.trace = lambda self, msg, *args, **kwargs: cls.logger.debug(
        f"TRACE: {msg}", *args, **kwargs
    )

    return cls
