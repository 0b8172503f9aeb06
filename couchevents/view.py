# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.
#

import logging

from . import events
from .base import Base
from .utils import view_path

log = logging.getLogger(__name__)

def is_boolean(value):
    return isinstance(value, bool)

def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def is_stale(value):
    return value in ('ok', 'update_after')

class ViewParam(object):
    """
    A view query parameter. Values failing ``validator`` are dropped and the
    previous value is kept. None always means "not set".
    """

    def __init__(self, validator=None):
        self.validator = validator
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return obj._params.get(self.name)

    def __set__(self, obj, value):
        if value is not None and self.validator is not None and not self.validator(value):
            log.warning('%s: rejected %s=%r', obj, self.name, value)
            return
        obj._params[self.name] = value

class View(Base):
    """
    A query on a CouchDB view.

    Usually obtained through :meth:`couchevents.Document.get_view` on a design document.
    Query parameters are plain attributes; only those set to something other
    than None are sent by :meth:`fetch_data`.

    :param base_uri: resource path of the design document
    :param name: name of the view
    :param params: initial query parameters
    """

    #: recognized query parameters, in the order they are sent
    PARAMS = (
        'descending',
        'endkey',
        'endkey_docid',
        'group',
        'group_level',
        'include_docs',
        'inclusive_end',
        'key',
        'limit',
        'reduce',
        'skip',
        'stale',
        'startkey',
        'startkey_docid',
    )

    default_handlers = dict(Base.default_handlers)
    default_handlers.update({
        events.EVENT_DATA: '_def_data',
    })

    descending = ViewParam(is_boolean)
    endkey = ViewParam()
    endkey_docid = ViewParam()
    group = ViewParam(is_boolean)
    group_level = ViewParam(is_number)
    include_docs = ViewParam(is_boolean)
    inclusive_end = ViewParam(is_boolean)
    key = ViewParam()
    limit = ViewParam(is_number)
    reduce = ViewParam(is_boolean)
    skip = ViewParam(is_number)
    stale = ViewParam(is_stale)
    startkey = ViewParam()
    startkey_docid = ViewParam()

    def __init__(self, base_uri='', name='', session=None, headers=None, **params):
        Base.__init__(self, session=session, headers=headers)

        self._params = {}
        self._base_uri = base_uri
        self._name = name
        self._update_uri()

        self.data = None

        for k, v in params.items():
            if k not in View.PARAMS:
                raise TypeError("unknown view parameter '%s'" % k)
            setattr(self, k, v)

    def _update_uri(self):
        self._uri = view_path(self._base_uri, self._name)

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

    def query_params(self):
        """
        The ``(name, value)`` pairs :meth:`fetch_data` sends

        :return: :py:class:`list`
        """
        return [(k, self._params[k]) for k in View.PARAMS
                if self._params.get(k) is not None]

    def fetch_data(self):
        """
        Query the view. Fires ``couch:data``.

        :return: dict with ``rows`` or None on failure
        """
        log.debug('fetch_data %s', self.uri)
        return self._send(events.EVENT_DATA, 'querying the view %s' % self.name,
                'GET', self.uri, params=self.query_params())

    def _def_data(self, response):
        self.data = response
