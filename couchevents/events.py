# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.
"""
Notifications published by the entity objects.

Every entity sends these signals with itself as the sender; connect with
``sender=entity`` (or use :meth:`couchevents.base.Base.on`) to listen to
one object, or without a sender to listen to all of them. Receivers get
either a ``response`` keyword (the decoded JSON body) or a ``message``
keyword (a human readable error).

A receiver returning ``False`` prevents the entity's default handler.
"""

from blinker import signal as _signal

EVENT_ERROR = 'couch:error'
EVENT_INFO = 'couch:info'
EVENT_FETCH_ALL = 'couch:fetchAll'
EVENT_OPENED = 'couch:opened'
EVENT_SAVED = 'couch:saved'
EVENT_DELETED = 'couch:deleted'
EVENT_DATA = 'couch:data'
EVENT_REPLICATED = 'couch:replicated'

Error = _signal(EVENT_ERROR)
Info = _signal(EVENT_INFO)
FetchAll = _signal(EVENT_FETCH_ALL)
Opened = _signal(EVENT_OPENED)
Saved = _signal(EVENT_SAVED)
Deleted = _signal(EVENT_DELETED)
Data = _signal(EVENT_DATA)
Replicated = _signal(EVENT_REPLICATED)


def event_name(name):
    """ Accept both ``'info'`` and ``'couch:info'`` """
    if not name.startswith('couch:'):
        name = 'couch:%s' % name
    return name


def get_signal(name):
    return _signal(event_name(name))
