#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import threading

# Configure basic logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

LOGGER_PREFIX = "Voreeal"


class VoreealLogger:
    """
    Logger registry for the Voreeal package.
    Each class gets one named logger, created on first use.
    """

    _loggers = {}
    _lock = threading.RLock()

    @staticmethod
    def getLogger(class_name):
        """Get a logger instance for the given class name."""
        with VoreealLogger._lock:
            if class_name not in VoreealLogger._loggers:
                VoreealLogger._loggers[class_name] = logging.getLogger(
                    f"{LOGGER_PREFIX}.{class_name}"
                )
            return VoreealLogger._loggers[class_name]


# Decorator to add logger to classes
def VOREEAL_LOGGER(cls):
    """Decorator to add logger functionality to a class."""
    cls.logger = VoreealLogger.getLogger(cls.__name__)

    # Logging helpers work on both instances and the class itself
    cls.debug = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.debug(msg, *args, **kwargs)
    )
    cls.info = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.info(msg, *args, **kwargs)
    )
    cls.warning = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.warning(msg, *args, **kwargs)
    )
    cls.error = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.error(msg, *args, **kwargs)
    )
    cls.critical = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.critical(
            msg, *args, **kwargs
        )
    )
    cls.trace = classmethod(
        lambda klass, msg, *args, **kwargs: klass.logger.debug(
            f"TRACE: {msg}", *args, **kwargs
        )
    )

    return cls
