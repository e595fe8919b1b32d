# -*- coding: utf-8 -*-
"""logging setup for snstopic.

Log records of the topic manager carry their structured fields (arn,
topicArn, queueArn) as record attributes via `extra`.
"""
import logging
import os
from copy import deepcopy
from logging.config import dictConfig

from clint.packages.colorama import Fore


def getLogger(name):
    return logging.getLogger(name)


class TopicFormatter(logging.Formatter):
    """Colored one-line output. INFO records are printed as plain message."""

    def format(self, record):
        msg = record.getMessage()
        if record.levelno == logging.DEBUG:
            module = os.path.splitext(os.path.basename(record.pathname))[0]
            return Fore.BLUE + 'DEBUG: %s: %s: %s' % (
                module, record.lineno, msg) + Fore.RESET
        elif record.levelno == logging.WARNING:
            return Fore.YELLOW + 'WARNING: %s' % msg + Fore.RESET
        elif record.levelno >= logging.ERROR:
            return Fore.RED + '%s: %s' % (record.levelname, msg) + Fore.RESET
        return msg


logging_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            '()': TopicFormatter,
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        'snstopic': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True,
        },
        'botocore': {
            'handlers': ['default'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}


def setup_logging(verbose=False):
    """Apply the snstopic logging config.

    :param verbose: log DEBUG messages of snstopic, too
    """
    lc = deepcopy(logging_config)
    if verbose:
        lc['loggers']['snstopic']['level'] = 'DEBUG'
    dictConfig(lc)
