# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

from .version import version_info, __version__

from .resource import DataSource, Session
from .exceptions import CouchException, RequestError, Timeout, ResourceError, \
ResourceNotFound, Unauthorized, ResourceConflict, ResourceGone, \
PreconditionFailed, RequestFailed

from .base import Base
from .view import View
from .document import Document
from .database import DB
from .server import Connect

import logging

LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG
}

def set_logging(level, handler=None):
    """
    Set level of logging, and choose where to display/save logs
    (file or standard output).
    """
    if not handler:
        handler = logging.StreamHandler()

    loglevel = LOG_LEVELS.get(level, logging.INFO)
    logger = logging.getLogger('couchevents')
    logger.setLevel(loglevel)
    format = r"%(asctime)s [%(process)d] [%(levelname)s] %(message)s"
    datefmt = r"%Y-%m-%d %H:%M:%S"

    handler.setFormatter(logging.Formatter(format, datefmt))
    logger.addHandler(handler)
