# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

class CouchException(Exception):
    """
    Base class

    All exceptions raised by a :class:`couchevents.resource.DataSource` derive from this exception.
    Entity objects catch it and turn it into a ``couch:error`` notification.
    """

class RequestError(CouchException):
    """
    Exception raised when error making the request to the resource
    """

    def __init__(self, ex):
        CouchException.__init__(self, ex)
        self._ex = ex

    def __str__(self):
        return str(self._ex)

class Timeout(RequestError):
    """
    Timeout
    """

    def __init__(self, ex, session, uri):
        RequestError.__init__(self, ex)
        self.timeout = getattr(session, "timeout", None)
        self.uri = uri

    def __str__(self):
        return "Timeout(timeout=%s, uri='%s')" % (self.timeout, self.uri)

class ResourceError(CouchException):
    """
    General http exception
    """

    status_int = None

    def __init__(self, msg=None, http_code=None, response=None):
        if isinstance(msg, bytes):
            msg = msg.decode('utf-8', 'replace')
        self.msg = msg or ''
        self.status_int = http_code or self.status_int
        self.response = response
        Exception.__init__(self, self.msg)

    def __str__(self):
        if self.msg:
            return self.msg
        return '%s (status %s)' % (self.__class__.__name__, self.status_int)

    @staticmethod
    def create_from_response(resp):
        status_code = resp.status_code
        error_type = _ExceptionMap.get(status_code, RequestFailed)
        return error_type(resp.content, http_code=status_code, response=resp)

class ResourceNotFound(ResourceError):
    """Exception raised when no resource was found at the given url.
    """
    status_int = 404

class Unauthorized(ResourceError):
    """Exception raised when an authorization is required to access to
    the resource specified.
    """

class ResourceGone(ResourceError):
    """
    http://www.w3.org/Protocols/rfc2616/rfc2616-sec10.html#sec10.4.11
    """
    status_int = 410

class RequestFailed(ResourceError):
    """Exception raised when an unexpected HTTP error is received in response
    to a request, or when the response body is not valid JSON.

    You can get the status code by e.status_int, or see anything about the
    response via e.response.
    """

class ResourceConflict(ResourceError):
    """ Exception raised when there is conflict while updating"""

class PreconditionFailed(ResourceError):
    """ Exception raised when 412 HTTP error is received in response
    to a request """

_ExceptionMap = {
    401: Unauthorized,
    403: Unauthorized,
    404: ResourceNotFound,
    409: ResourceConflict,
    410: ResourceGone,
    412: PreconditionFailed,
}
