#-*- coding: utf-8 -*-
"""
logging configuration for the gpugraph namespace.
"""
import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level=logging.INFO, log_file=None):
    """
    configures the 'gpugraph' logger.

    :param level: logging level (e.g. logging.DEBUG)
    :param log_file: optional path to write the log to
    """
    logger = logging.getLogger('gpugraph')
    logger.setLevel(level)

    # avoid duplicate output when configured twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug('logging initialized.')
    return logger
