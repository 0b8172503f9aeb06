# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

import logging

from . import events
from .base import Base
from .utils import document_path, escape_docid
from .view import View

log = logging.getLogger(__name__)

class Document(Base):
    """
    Provides access to one document of a database

    Usually obtained through :meth:`couchevents.DB.get_document`.

    ``info`` holds the result of :meth:`fetch_info`, ``data`` the document body
    as returned by :meth:`open`. ``data`` may be replaced before calling :meth:`save`.

    :param base_uri: URI of the server, without trailing slash
    :param database_name: The name of the database
    :param docid: The document id, unescaped
    :param fetch: If True issue :meth:`fetch_info` right away
    """

    default_handlers = dict(Base.default_handlers)
    default_handlers.update({
        events.EVENT_INFO: '_def_info',
        events.EVENT_OPENED: '_def_opened',
        events.EVENT_SAVED: '_def_saved',
        events.EVENT_DELETED: '_def_deleted',
    })

    def __init__(self, base_uri='', database_name='', docid='', session=None,
                 headers=None, fetch=False):
        Base.__init__(self, session=session, headers=headers)

        self._base_uri = base_uri
        self._database_name = database_name
        self._id = escape_docid(docid)
        self._update_uri()

        self.info = None
        self.data = None

        if fetch:
            self.fetch_info()

    def _update_uri(self):
        self._uri = document_path(self._base_uri, self._database_name, self._id)

    @property
    def base_uri(self):
        return self._base_uri

    @base_uri.setter
    def base_uri(self, value):
        self._base_uri = value
        self._update_uri()

    @property
    def database_name(self):
        return self._database_name

    @database_name.setter
    def database_name(self, value):
        self._database_name = value
        self._update_uri()

    @property
    def id(self):
        """ The escaped document id """
        return self._id

    @id.setter
    def id(self, value):
        self._id = escape_docid(value)
        self._update_uri()

    def fetch_info(self):
        """
        Get the document. Fires ``couch:info``.

        :return: dict or None on failure
        """
        log.debug('fetch_info %s', self.uri)
        return self._send(events.EVENT_INFO,
                'fetching the information for the document %s' % self.id, 'GET', self.uri)

    def open(self, **options):
        """
        Get the document body. Fires ``couch:opened``.

        :param options: query parameters, e.g. ``rev='1-abc'`` or ``revs_info=True``
        :return: dict or None on failure
        """
        log.debug('open %s', self.uri)
        return self._send(events.EVENT_OPENED, 'opening the document %s' % self.id,
                'GET', self.uri, params=options)

    def save(self, **options):
        """
        PUT ``data`` under its ``_id``. Fires ``couch:saved``.

        On success ``data`` is updated with the returned ``_id`` and ``_rev``.

        :param options: query parameters, e.g. ``batch='ok'``
        :return: dict like {"ok": true, "id": "...", "rev": "..."} or None on failure
        """
        log.debug('save %s', self.uri)
        data = self.data
        if not data or not data.get('_id'):
            self._fire(events.EVENT_ERROR, message='No data found on the document to save.')
            return None

        source = document_path(self.base_uri, self.database_name, escape_docid(data['_id']))
        return self._send(events.EVENT_SAVED, 'saving the document %s' % data['_id'],
                'PUT', source, payload=data, params=options)

    def remove(self, **options):
        """
        DELETE the document. Fires ``couch:deleted``.

        The revision is taken from ``options['rev']`` or from ``data['_rev']``.

        :return: dict like {"ok": true, "rev": "..."} or None on failure
        """
        log.debug('remove %s', self.uri)
        if not options.get('rev'):
            rev = (self.data or {}).get('_rev')
            if not rev:
                self._fire(events.EVENT_ERROR,
                    message='A revision is required to delete the document %s.' % self.id)
                return None
            options['rev'] = rev

        return self._send(events.EVENT_DELETED, 'deleting the document %s' % self.id,
                'DELETE', self.uri, params=options)

    def get_all_views(self):
        """
        Names of the views of this design document, taken from ``info``.

        Fires ``couch:error`` and returns an empty list when :meth:`fetch_info`
        has not provided any views.
        """
        info = self.info
        if not info or not info.get('views'):
            self._fire(events.EVENT_ERROR,
                message='There is no information for this document available.')
            return []
        return list(info['views'].keys())

    def get_view(self, name, **config):
        """
        Get a :class:`couchevents.View` of this design document. No request is made.

        :param config: initial view parameters, e.g. ``limit=10``
        """
        return View(self.uri, name, session=self.session, headers=self.headers, **config)

    def _def_info(self, response):
        self.info = response

    def _def_opened(self, response):
        self.data = response

    def _def_saved(self, response):
        if self.data is None:
            return
        self.data['_id'] = response.get('id', self.data.get('_id'))
        if 'rev' in response:
            self.data['_rev'] = response['rev']

    def _def_deleted(self, response):
        if self.data is None:
            return
        if 'rev' in response:
            self.data['_rev'] = response['rev']
        self.data['_deleted'] = True
