# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

import logging

from . import events
from .exceptions import CouchException
from .resource import DataSource, Session

log = logging.getLogger(__name__)

class Base(object):
    """
    Common plumbing for :class:`Connect`, :class:`DB`, :class:`Document` and :class:`View`.

    Owns a lazily created :class:`couchevents.resource.DataSource` and publishes
    the ``couch:error`` notification, whose default handler logs the message.

    :param session: A :class:`couchevents.Session`. Children created through the
            factory methods share their parent's session.
    :param headers: Extra headers sent with every request
    """

    #: event name -> name of the method run after the receivers, unless one returns False
    default_handlers = {
        events.EVENT_ERROR: '_def_error',
    }

    _uri = ''

    def __init__(self, session=None, headers=None):
        if session is None:
            session = Session()
        self.session = session
        self.headers = dict(headers or {})
        self._data_source = None

    @property
    def uri(self):
        """ The resource path of this object """
        return self._uri

    @property
    def data_source(self):
        if self._data_source is None:
            self._data_source = self._new_data_source()
        return self._data_source

    def _get_data_source(self, force_new=False):
        if force_new:
            return self._new_data_source()
        return self.data_source

    def _new_data_source(self):
        return DataSource(self.session, self.uri, self.headers)

    def on(self, event, receiver, weak=False):
        """
        Connect ``receiver`` to ``event`` for this object only.

        The receiver is called as ``receiver(sender, **payload)``.

        By default the signal holds a strong reference to ``receiver`` so
        lambdas and closures stay connected. A receiver that refers back to
        this object then keeps it alive until :meth:`off` is called. Pass
        ``weak=True`` to let the receiver go away with its last reference.
        """
        events.get_signal(event).connect(receiver, sender=self, weak=weak)
        return receiver

    def off(self, event, receiver):
        events.get_signal(event).disconnect(receiver, sender=self)

    def _fire(self, event, **payload):
        """
        Send ``event`` and run the default handler.

        :return: False if a receiver prevented the default handler
        """
        event = events.event_name(event)
        results = events.get_signal(event).send(self, **payload)
        if any(rv is False for _, rv in results):
            log.debug('%s: default handler for %s prevented', self, event)
            return False

        handler = self.default_handlers.get(event)
        if handler is not None:
            getattr(self, handler)(**payload)
        return True

    def _send(self, event, doing, method, source, payload=None, params=None, force_new=True):
        """
        Issue one request against ``source`` and publish the outcome.

        Fires ``event`` with the decoded response, or ``couch:error`` with a
        message built from ``doing``.

        :return: the decoded response or None on failure
        """
        ds = self._get_data_source(force_new)
        ds.source = source
        try:
            response = ds.request(method, payload=payload, params=params).json_body
        except CouchException as e:
            self._fire(events.EVENT_ERROR,
                message='An error occurred %s: %s' % (doing, e))
            return None

        self._fire(event, response=response)
        return response

    def _def_error(self, message):
        log.error(message)

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self.uri)
