# -*- coding: utf-8 -
#
# This file is part of couchdb-events released under the MIT license.
# See the NOTICE for more information.

from urllib.parse import quote, quote_plus

# encodeURIComponent leaves these alone
COMPONENT_SAFE = "!~*'()"

def url_quote(s, charset='utf-8', safe='/:'):
    """ URL encode a single string with a given encoding. """
    if not isinstance(s, (str, bytes)):
        s = str(s)
    return quote(s, safe=safe, encoding=charset if isinstance(s, str) else None)

def url_encode(obj, charset="utf8"):
    """ Encode params of a url where obj is a dict or a list of 2-tuples """
    ret = []
    if isinstance(obj, dict):
        it = obj.items()
    else:
        it = iter(obj)

    for k, v in it:
        if not isinstance(v, (tuple, list)):
            v = [v]
        for vi in v:
            ret.append('%s=%s' % (quote(str(k)), quote_plus(str(vi), encoding=charset)))
    return '&'.join(ret)

def make_uri(segments, params=None, charset="utf-8", safe="/:"):
    """
    Assemble a uri based on a base, any number of path segments, and query string parameters.

    The first segment is used verbatim, the following ones are quoted and
    joined with a single slash. Empty segments are skipped.

    @params A list of 2-tuples or a dict
    """
    segments = [s for s in segments if s]

    _path = []
    for count, s in enumerate(segments):
        if count == 0:
            _path.append(s)
            continue
        if not _path[-1].endswith('/'):
            _path.append('/')
        _path.append(url_quote(s, charset, safe))

    if params is not None:
        params_str = url_encode(params, charset)
        if params_str:
            _path.extend(['?', params_str])

    return ''.join(_path)

def escape_docid(docid):
    """ Quote a document id for use as a path segment, keeping `_design/` intact """
    docid = str(docid)
    if docid.startswith('/'):
        docid = docid[1:]
    if docid.startswith('_design/'):
        return '_design/%s' % url_quote(docid[8:], safe=COMPONENT_SAFE)
    return url_quote(docid, safe=COMPONENT_SAFE)

def strip_trailing_slash(uri):
    if uri.endswith('/'):
        return uri[:-1]
    return uri

def server_path(base_uri):
    return '%s/' % base_uri

def database_path(base_uri, name):
    return '%s/%s/' % (base_uri, name)

def document_path(base_uri, database_name, docid):
    return '%s/%s/%s' % (base_uri, database_name, docid)

def view_path(base_uri, name):
    return '%s/_view/%s' % (base_uri, name)
