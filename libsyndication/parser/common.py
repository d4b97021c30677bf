""":mod:`libsyndication.parser.common` --- Common functions
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Common functions used in several parser variants.

"""
import datetime
import urllib.parse

from ..codecs import DecodeError, Rfc3339, Rfc822, W3cDateTime
from ..format import XML_XMLNS
from ..tz import parse_offset, utc

__all__ = 'get_text', 'get_xml_base', 'parse_datetime', 'resolve_uri'

_rfc3339 = Rfc3339()
_rfc822 = Rfc822()
_datetime_formats = [
    ('%Y-%m-%d %H:%M:%S', None),
    ('%m/%d/%Y %H:%M:%S GMT', utc),
    ('%m/%d/%y %H:%M:%S GMT', utc),
    ('%Y.%m.%d %H:%M:%S', None),
    ('%d %b %Y %H:%M:%S %z', None),
]


def get_xml_base(element, default):
    """Get the ``xml:base`` of the ``element`` resolved against
    the ``default`` base, or the ``default`` if there's no ``xml:base``.

    """
    base = element.get('{' + XML_XMLNS + '}base')
    if base is None:
        return default
    return resolve_uri(default, base)


def resolve_uri(base, uri):
    """Resolve the possibly relative ``uri`` against the ``base``."""
    if uri is None:
        return None
    uri = uri.strip()
    if not base:
        return uri
    return urllib.parse.urljoin(base, uri)


def get_text(element):
    """Get the stripped text of the ``element``, or :const:`None` if it's
    empty.

    """
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def parse_datetime(string, default_tzinfo=utc):
    """Parse the date time ``string`` in whatever format syndication
    documents in the wild use: :rfc:`3339`, :rfc:`822`, the W3C profile of
    ISO 8601, and a few others.

    :param string: the date time string to parse
    :type string: :class:`str`
    :param default_tzinfo: the time zone to use when the string lacks it
    :type default_tzinfo: :class:`datetime.tzinfo`
    :returns: the parsed date time, or :const:`None` if ``string`` is empty
    :rtype: :class:`datetime.datetime`
    :raises libsyndication.codecs.DecodeError: when the string cannot be
                                               parsed

    """
    if string is None or not string.strip():
        return None
    string = string.strip()
    for codec in (_rfc3339, _rfc822, W3cDateTime(default_tzinfo)):
        try:
            return codec.decode(string)
        except DecodeError:
            pass
    for fmt, tzinfo in _datetime_formats:
        try:
            if fmt.endswith('%z'):
                dt = datetime.datetime.strptime(string[:-5].strip(),
                                                fmt[:-3])
                tzinfo = parse_offset(string[-5:])
            else:
                dt = datetime.datetime.strptime(string, fmt)
            return dt.replace(tzinfo=tzinfo or default_tzinfo)
        except ValueError:
            continue
    raise DecodeError('failed to parse datetime: ' + repr(string))
