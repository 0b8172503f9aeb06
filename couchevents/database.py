# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

import logging

from . import events
from .base import Base
from .document import Document
from .utils import database_path

log = logging.getLogger(__name__)

class DB(Base):
    """
    Provides access to a CouchDB database

    Usually obtained through :meth:`couchevents.Connect.get_database`.

    :param base_uri: URI of the server, without trailing slash
    :param name: The name of the database
    :param fetch: If True issue :meth:`fetch_info` right away
    """

    default_handlers = dict(Base.default_handlers)
    default_handlers.update({
        events.EVENT_INFO: '_def_info',
        events.EVENT_FETCH_ALL: '_def_fetch_all',
    })

    def __init__(self, base_uri='', name='', session=None, headers=None, fetch=False):
        Base.__init__(self, session=session, headers=headers)

        self._base_uri = base_uri
        self._name = name
        self._update_uri()

        self.info = None
        self.documents = None

        if fetch:
            self.fetch_info()

    def _update_uri(self):
        self._uri = database_path(self._base_uri, self._name)

    @property
    def base_uri(self):
        return self._base_uri

    @base_uri.setter
    def base_uri(self, value):
        self._base_uri = value
        self._update_uri()

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value
        self._update_uri()

    def fetch_info(self):
        """
        Get database information. Fires ``couch:info``.

        :return: dict or None on failure
        """
        log.debug('fetch_info %s', self.uri)
        return self._send(events.EVENT_INFO,
                'fetching the information for the database %s' % self.name, 'GET', self.uri)

    def fetch_all_documents(self, **options):
        """
        List the documents of the database. Fires ``couch:fetchAll``.

        :param options: query parameters for ``_all_docs``, e.g. ``include_docs=True``
        :return: dict or None on failure
        """
        log.debug('fetch_all_documents %s', self.uri)
        return self._send(events.EVENT_FETCH_ALL,
                'fetching the documents of the database %s' % self.name, 'GET',
                self.uri + '_all_docs', params=options)

    def get_document(self, docid):
        """
        Get a :class:`couchevents.Document` of this database. No request is made.
        """
        return Document(self.base_uri, self.name, docid,
                session=self.session, headers=self.headers)

    def _def_info(self, response):
        self.info = response

    def _def_fetch_all(self, response):
        self.documents = response
