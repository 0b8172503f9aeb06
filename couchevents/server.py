# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

import logging

from . import events
from .base import Base
from .database import DB
from .utils import server_path, strip_trailing_slash

log = logging.getLogger(__name__)

class Connect(Base):
    """
    A Connect object represents a CouchDB server endpoint.

    :param uri: URI of the server. One trailing slash is stripped.
    :param session: A :class:`couchevents.Session` object. Use this to configure the
            connection parameters such as timeout and authentication.
    :param fetch: If True issue :meth:`fetch_info` right away
    """

    default_handlers = dict(Base.default_handlers)
    default_handlers.update({
        events.EVENT_INFO: '_def_info',
        events.EVENT_FETCH_ALL: '_def_fetch_all',
    })

    def __init__(self, uri='http://127.0.0.1:5984', session=None, headers=None, fetch=False):
        Base.__init__(self, session=session, headers=headers)

        self.base_uri = uri
        self.info = {}
        self.databases = []

        if fetch:
            self.fetch_info(True)

    @property
    def base_uri(self):
        return self._base_uri

    @base_uri.setter
    def base_uri(self, value):
        self._base_uri = strip_trailing_slash(value)
        self._uri = self._base_uri

    def fetch_info(self, force_new=True):
        """
        Get server info. Fires ``couch:info``.

        :return: dict or None on failure
        """
        log.debug('fetch_info %s', self.base_uri)
        return self._send(events.EVENT_INFO, 'fetching the information', 'GET',
                server_path(self.base_uri), force_new=force_new)

    def fetch_all_databases(self, force_new=True):
        """
        Get all database names on the server. Fires ``couch:fetchAll``.

        :return: List of database names or None on failure
        """
        log.debug('fetch_all_databases %s', self.base_uri)
        return self._send(events.EVENT_FETCH_ALL, 'fetching the list of databases', 'GET',
                '%s/_all_dbs' % self.base_uri, force_new=force_new)

    def get_database(self, name):
        """
        Get a :class:`couchevents.DB` for ``name``. No request is made.
        """
        return DB(self.base_uri, name, session=self.session, headers=self.headers)

    def replicate(self, source, target, **config):
        """
        Replicate a database. Fires ``couch:replicated``.

        More info about replication here:
        `http://wiki.apache.org/couchdb/Replication`

        :param source: URI or dbname of the source
        :param target: URI or dbname of the target
        :param config: any other replication field, e.g. ``continuous=True``
        :return: dict or None on failure
        """
        if not isinstance(source, str) or not isinstance(target, str):
            self._fire(events.EVENT_ERROR,
                message='Cannot replicate %r to %r.' % (source, target))
            return None

        payload = dict(config)
        payload['source'] = source
        payload['target'] = target

        return self._send(events.EVENT_REPLICATED, 'replicating %s to %s' % (source, target),
                'POST', '%s/_replicate' % self.base_uri, payload=payload)

    def _def_info(self, response):
        self.info = response

    def _def_fetch_all(self, response):
        self.databases = response
