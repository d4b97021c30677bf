""":mod:`libsyndication.codecs` --- Common codecs
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

This module provides commonly used codecs to decode the textual values
that syndication formats put into elements and attributes e.g. dates,
numbers, flags.

Every codec only decodes: :mod:`libsyndication` reads documents and never
writes them back.

"""
import datetime
import re

from .tz import FixedOffset, parse_offset, utc

__all__ = ('Boolean', 'Codec', 'CommaSeparatedList', 'DecodeError',
           'Integer', 'Rfc3339', 'Rfc822', 'W3cDateTime')


class DecodeError(ValueError):
    """Rise when decoding XML data to Python values goes wrong."""


class Codec(object):
    """Abstract base class for codecs to decode XML text into Python
    values.

    """

    def decode(self, text):
        """Decode the given string to a Python value.

        :param text: string to decode
        :type text: :class:`str`
        :returns: decoded Python value
        :raises DecodeError: when decoding the given XML string goes wrong

        """
        raise NotImplementedError(
            'override decode() method of {0.__module__}.{0.__name__} '
            'class'.format(type(self))
        )


def build_datetime(match, tzinfo):
    """Make a :class:`datetime.datetime` from the named groups of a date
    time pattern.  Omitted fields fall back to their least values.

    """
    fraction = (match.group('microsecond') or '').ljust(6, '0')
    fields = [
        int(match.group(name) or least)
        for name, least in [('year', 1), ('month', 1), ('day', 1),
                            ('hour', 0), ('minute', 0), ('second', 0)]
    ]
    try:
        return datetime.datetime(*fields, microsecond=int(fraction[:6]),
                                 tzinfo=tzinfo)
    except ValueError as e:
        raise DecodeError(str(e))


class Rfc3339(Codec):
    """Codec to read :class:`datetime.datetime` values from :rfc:`3339`
    format.

    :param prefer_utc: normalize all timezones to UTC.
                       :const:`False` by default
    :type prefer_utc: :class:`bool`

    """

    #: (:class:`re.RegexObject`) The regular expression pattern that
    #: matches to valid :rfc:`3339` date time string.
    PATTERN = re.compile(r'''
        ^
        (?P<year> \d{4} ) - (?P<month> 0[1-9] | 1[012] )
                          - (?P<day> 0[1-9] | [12]\d | 3[01] )
        T
        (?P<hour> [01]\d | 2[0-3] ) : (?P<minute> [0-5]\d )
                                    : (?P<second> [0-5]\d | 60 )
                                    (?: \. (?P<microsecond> \d+ ) )?
        (?P<tz> Z | [+-] (?: [01]\d | 2[0-3] ) : [0-5]\d )
        $
    ''', re.VERBOSE)

    def __init__(self, prefer_utc=False):
        self.prefer_utc = bool(prefer_utc)

    def decode(self, text):
        if text is None:
            raise DecodeError('expected a string, not None')
        text = text.strip()
        match = self.PATTERN.match(text)
        if not match:
            raise DecodeError(repr(text) +
                              ' is not valid RFC3339 date time string')
        tzinfo = parse_offset(match.group('tz'))
        dt = build_datetime(match, tzinfo)
        if self.prefer_utc and tzinfo is not utc:
            dt = dt.astimezone(utc)
        return dt


class W3cDateTime(Codec):
    """Codec to read the `W3C date and time formats`__, a profile of
    ISO 8601 that Dublin Core, APML and BlogML documents use.  Unlike
    :class:`Rfc3339` it accepts reduced precisions (``2003``, ``2003-12``,
    ``2003-12-13``, ``2003-12-13T18:30``) and timestamps without any time
    zone designator, which are treated as ``default_tzinfo``.

    :param default_tzinfo: the time zone for timestamps without time zone
                           designators.  :data:`~libsyndication.tz.utc`
                           by default
    :type default_tzinfo: :class:`datetime.tzinfo`

    __ http://www.w3.org/TR/NOTE-datetime

    """

    PATTERN = re.compile(r'''
        ^
        (?P<year> \d{4} )
        (?: - (?P<month> \d\d )
            (?: - (?P<day> \d\d )
                (?: [T\s] (?P<hour> \d\d ) : (?P<minute> \d\d )
                    (?: : (?P<second> \d\d )
                        (?: \. (?P<microsecond> \d+ ) )? )?
                    (?P<tz> Z | [+-] \d\d :? \d\d )?
                )?
            )?
        )?
        $
    ''', re.VERBOSE)

    def __init__(self, default_tzinfo=utc):
        self.default_tzinfo = default_tzinfo

    def decode(self, text):
        if text is None:
            raise DecodeError('expected a string, not None')
        text = text.strip()
        match = self.PATTERN.match(text)
        if not match:
            raise DecodeError(repr(text) +
                              ' is not valid W3C date time string')
        if match.group('tz'):
            tzinfo = parse_offset(match.group('tz'))
        else:
            tzinfo = self.default_tzinfo
        return build_datetime(match, tzinfo)


class Rfc822(Codec):
    """Codec to decode :class:`datetime.datetime` values from :rfc:`822`
    format, which RSS 0.9x and 2.0 use.  The leading day of week is
    optional, as many feeds in the wild omit it.

    """

    WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
    MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug',
              'Sep', 'Oct', 'Nov', 'Dec')
    TIMEZONES = {
        'UT': FixedOffset(0 * 60),
        'UTC': FixedOffset(0 * 60),
        'GMT': FixedOffset(0 * 60),
        'Z': FixedOffset(0 * 60),
        'EST': FixedOffset(-5 * 60),
        'EDT': FixedOffset(-4 * 60),
        'CST': FixedOffset(-6 * 60),
        'CDT': FixedOffset(-5 * 60),
        'MST': FixedOffset(-7 * 60),
        'MDT': FixedOffset(-6 * 60),
        'PST': FixedOffset(-8 * 60),
        'PDT': FixedOffset(-7 * 60),
    }
    PATTERN = re.compile(r'''
        ^ \s*
        (?: (?:''' + '|'.join(WEEKDAYS) + r''' ) , \s* )?
        (?P<day> \d\d? ) \s+
        (?P<month> ''' + '|'.join(MONTHS) + r''' ) \s+
        (?P<year> \d{4} ) \s+
        (?P<hour> \d\d ) : (?P<minute> \d\d ) (?: : (?P<second> \d\d ) )? \s+
        (?P<tz> (?P<tz_offset> [+-] \d\d :? \d\d )
        |       (?P<tz_named>''' + '|'.join(map(re.escape, TIMEZONES)) + r''' )
        )
        \s* $
    ''', re.IGNORECASE | re.VERBOSE)

    def decode(self, text):
        if text is None:
            raise DecodeError('expected a string, not None')
        exc = DecodeError(repr(text) + ' is an invalid rfc822 string')
        m = self.PATTERN.match(text)
        if not m:
            raise exc
        month_string = m.group('month').title()
        try:
            month = self.MONTHS.index(month_string) + 1
        except ValueError:
            raise exc
        if m.group('tz_offset'):
            tz = parse_offset(m.group('tz_offset'))
        else:
            tz = self.TIMEZONES[m.group('tz_named').upper()]
        try:
            return datetime.datetime(
                int(m.group('year')), month, int(m.group('day')),
                int(m.group('hour')), int(m.group('minute')),
                int(m.group('second') or 0),
                tzinfo=tz
            )
        except ValueError as e:
            raise DecodeError(str(e))


class Integer(Codec):
    """Codec to decode integer numbers."""

    def decode(self, text):
        try:
            return int(text.strip())
        except (AttributeError, ValueError) as e:
            raise DecodeError(str(e))


class Boolean(Codec):
    """Codec to interpret boolean representation in strings e.g. ``'true'``,
    ``'no'``.

    :param true: text to parse as :const:`True`.  ``'true'`` by default
    :type true: :class:`str`, :class:`tuple`
    :param false: text to parse as :const:`False`.  ``'false'`` by default
    :type false: :class:`str`, :class:`tuple`
    :param default_value: default value when it cannot be parsed
    :type default_value: :class:`bool`

    """

    def __init__(self, true='true', false='false', default_value=None):
        self.true = (true,) if isinstance(true, str) else tuple(true)
        self.false = (false,) if isinstance(false, str) else tuple(false)
        self.default_value = default_value

    def decode(self, text):
        text = (text or '').strip().lower()
        if not text:
            return self.default_value
        elif text in self.true:
            return True
        elif text in self.false:
            return False
        raise DecodeError('{0!r} is neither {1} nor {2}'.format(
            text, '/'.join(self.true), '/'.join(self.false)
        ))


class CommaSeparatedList(Codec):
    """Decode a comma-separated list e.g. ``'a,b,c'`` into a Python list.
    Whitespaces between commas are ignored.

    >>> codec = CommaSeparatedList()
    >>> codec.decode('technology, business')
    ['technology', 'business']

    :param item_codec: an optional codec to decode each item with
    :type item_codec: :class:`Codec`

    """

    def __init__(self, item_codec=None):
        self.item_codec = item_codec

    def decode(self, text):
        if text is None or not text.strip():
            return []
        items = [elem.strip() for elem in text.split(',') if elem.strip()]
        if self.item_codec is not None:
            items = [self.item_codec.decode(item) for item in items]
        return items
