# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

import json
import logging

import requests

from .version import __version__
from .exceptions import RequestError, RequestFailed, ResourceError, Timeout
from .utils import make_uri

USER_AGENT = 'couchdb-events/%s' % __version__

log = logging.getLogger(__name__)

class Session(requests.Session):
    """
    The http session shared by a :class:`couchevents.Connect` and every object it creates.

    See `http://docs.python-requests.org/en/latest/api/#sessionapi`.

    :param timeout: seconds applied to every request issued through this session
    :param auth: anything `requests` accepts as ``auth``
    """

    def __init__(self, timeout=None, auth=None):
        requests.Session.__init__(self)
        self.timeout = timeout
        if auth is not None:
            self.auth = auth

    def request(self, method, url, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        return requests.Session.request(self, method, url, **kwargs)

class CouchDBResponse(object):

    def __init__(self, response):
        self.response = response
        self.status_int = response.status_code

    @property
    def json_body(self):
        try:
            body = self.response.content
        except requests.RequestException as e:
            raise RequestError(e)

        try:
            if isinstance(body, bytes):
                body = body.decode('utf-8')
            return json.loads(body)
        except ValueError as e:
            # UnicodeDecodeError included
            raise RequestFailed('Invalid JSON in response: %s' % e,
                    http_code=self.status_int, response=self.response)

class DataSource(object):
    """
    A request object bound to one ``source`` URL.

    Entities create one per request (see :meth:`couchevents.base.Base._get_data_source`)
    so that concurrent calls never share ``source`` or headers.
    """

    safe = ":/%"
    charset = 'utf-8'
    response_class = CouchDBResponse

    def __init__(self, session, source="http://127.0.0.1:5984", headers=None):
        self.session = session
        self.source = source
        self.headers = dict(headers or {})

    def get(self, path=None, headers=None, params=None, stream=False):
        return self.request("GET", path=path, headers=headers, params=params, stream=stream)

    def head(self, path=None, headers=None, params=None, stream=False):
        return self.request("HEAD", path=path, headers=headers,
                params=params, stream=stream)

    def delete(self, path=None, headers=None, params=None, stream=False):
        return self.request("DELETE", path=path, headers=headers,
                params=params, stream=stream)

    def post(self, path=None, payload=None, headers=None, params=None, stream=False):
        return self.request("POST", path=path, payload=payload,
                        headers=headers, params=params, stream=stream)

    def put(self, path=None, payload=None, headers=None, params=None, stream=False):
        return self.request("PUT", path=path, payload=payload,
                        headers=headers, params=params, stream=stream)

    def request(self, method, path=None, payload=None, headers=None, params=None, stream=False):
        """
        Perform HTTP call to the couchdb server

        @param method: str, the HTTP action to be performed:
            'GET', 'HEAD', 'POST', 'PUT', or 'DELETE'
        @param path: str, path to add to the source
        @param headers: dict, optional headers that will
            be added to HTTP request.
        @param params: Optional parameters added to the request, a dict or a list of 2-tuples.
        @param stream Should the request be streamed
        @return: response object
        @raise: RequestError on transport failure, a ResourceError subclass on HTTP status >= 400
        """

        _headers = dict(self.headers)
        _headers.update(headers or {})
        _headers.setdefault('Accept', 'application/json')
        _headers.setdefault('Content-Type', 'application/json')
        _headers.setdefault('User-Agent', USER_AGENT)

        if payload is not None:
            if not hasattr(payload, 'read') and not isinstance(payload, (str, bytes)):
                payload = json.dumps(payload)

            if isinstance(payload, str):
                payload = payload.encode(self.charset)

        params = self._encode_params(params)
        uri = make_uri((self.source, path), params=params, charset=self.charset,
                       safe=self.safe)

        log.debug('%s %s', method, uri)
        try:
            resp = self.session.request(method, url=uri,
                             data=payload, headers=_headers, stream=stream)
        except requests.Timeout as e:
            raise Timeout(e, self.session, uri)
        except requests.RequestException as e:
            raise RequestError(e)

        status_code = resp.status_code

        if status_code >= 400:
            raise ResourceError.create_from_response(resp)

        return self.response_class(resp)

    _JSON_PARAMS = (
        'startkey',
        'endkey',
        'key',
        'keys',
    )

    _BOOLEAN_PARAMS = (
        'descending',
        'group',
        'reduce',
        'include_docs',
        'inclusive_end',
        'update_seq',
        'conflicts',
        'attachments',
        'revs',
        'revs_info',
    )

    def _encode_params(self, params):
        """ encode parameters in json if needed, keeping the order they were given in """

        if params is None:
            return None

        if isinstance(params, dict):
            params = params.items()

        _params = []
        for name, value in params:
            if value is None:
                continue

            if name in DataSource._JSON_PARAMS:
                value = json.dumps(value)
            elif name in DataSource._BOOLEAN_PARAMS or isinstance(value, bool):
                if value:
                    value = 'true'
                else:
                    value = 'false'

            _params.append((name, value))
        return _params
