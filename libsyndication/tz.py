""":mod:`libsyndication.tz` --- Time zones of syndication timestamps
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Timestamps in syndication documents carry their time zones as numeric
offsets (``+09:00``, ``-0500``) or ``Z``, and many of them in the wild
carry none at all.  For the latter, the language of the document is
the best hint there is, e.g. an RSS channel of ``<language>ko-kr</language>``
is very likely to be written in KST.

.. data:: utc

   (:class:`datetime.timezone`) The :class:`~datetime.tzinfo` instance
   that represents UTC.

"""
import datetime
import re

__all__ = ('LOCALE_TZINFO_TABLE', 'FixedOffset', 'guess_tzinfo_by_locale',
           'guess_tzinfo_by_language_tag', 'parse_offset', 'utc')


utc = datetime.timezone.utc

OFFSET_PATTERN = re.compile(r'^([+-])(\d\d):?(\d\d)$')


class FixedOffset(datetime.tzinfo):
    """Fixed offset in minutes east from UTC.  Two offsets are equal if
    they are the same amount of minutes, regardless of their names.

    >>> kst = FixedOffset(9 * 60, name='Asia/Seoul')  # KST +09:00
    >>> datetime.datetime(2013, 8, 15, 3, 18, 37, tzinfo=utc).astimezone(kst)
    datetime.datetime(2013, 8, 15, 12, 18, 37,
                      tzinfo=<libsyndication.tz.FixedOffset Asia/Seoul>)

    :param offset: minutes east from UTC
    :type offset: :class:`int`
    :param name: the optional name.  the offset e.g. ``'+09:00'``
                 by default
    :type name: :class:`str`

    """

    def __init__(self, offset, name=None):
        self.offset = datetime.timedelta(minutes=offset)
        if name is None:
            hours, minutes = divmod(abs(offset), 60)
            name = '{0}{1:02d}:{2:02d}'.format('-' if offset < 0 else '+',
                                               hours, minutes)
        self.name = name

    def utcoffset(self, dt):
        return self.offset

    def dst(self, dt):
        return datetime.timedelta(0)

    def tzname(self, dt):
        return self.name

    def __eq__(self, other):
        return isinstance(other, FixedOffset) and self.offset == other.offset

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.offset)

    def __repr__(self):
        return '<{0.__module__}.{0.__name__} {1}>'.format(type(self),
                                                          self.name)


def parse_offset(string):
    """Parse the time zone designator of timestamps: ``Z``, or a numeric
    offset with or without the colon.

    >>> parse_offset('+09:00')
    <libsyndication.tz.FixedOffset +09:00>
    >>> parse_offset('-0500')
    <libsyndication.tz.FixedOffset -05:00>

    :param string: the time zone designator
    :type string: :class:`str`
    :returns: the time zone
    :rtype: :class:`datetime.tzinfo`
    :raises ValueError: when the ``string`` is not a designator

    """
    if string.upper() == 'Z':
        return utc
    match = OFFSET_PATTERN.match(string)
    if not match:
        raise ValueError(repr(string) + ' is not a time zone offset')
    sign, hours, minutes = match.groups()
    offset = int(hours) * 60 + int(minutes)
    return FixedOffset(-offset if sign == '-' else offset)


#: (:class:`dict`) Language codes to the time zones of the countries that
#: speak them.  A language spoken in only one of the countries implies
#: the time zone by itself.
LOCALE_TZINFO_TABLE = {
    'ko': {'kr': FixedOffset(9 * 60, 'Asia/Seoul')},
    'ja': {'jp': FixedOffset(9 * 60, 'Asia/Tokyo')},
    'zh': {
        'cn': FixedOffset(8 * 60, 'Asia/Shanghai'),
        'hk': FixedOffset(8 * 60, 'Asia/Hong_Kong'),
        'tw': FixedOffset(8 * 60, 'Asia/Taipei'),
    },
}


def guess_tzinfo_by_locale(language, country=None):
    """Guess the most commonly used time zone from the given locale.

    :param language: the language code e.g. ``ko``, ``JA``
    :type language: :class:`str`
    :param country: optional country code e.g. ``kr``, ``JP``
    :type country: :class:`str`
    :return: the most commonly used time zone, or :const:`None` if can't
             guess
    :rtype: :class:`datetime.tzinfo`
    :raises ValueError: when the codes are not two letters

    """
    if not isinstance(language, str):
        raise TypeError('language must be a string, not ' + repr(language))
    elif not (country is None or isinstance(country, str)):
        raise TypeError('country must be a string, not ' + repr(country))
    language = language.strip().lower()
    if len(language) != 2:
        raise ValueError(repr(language) + ' is not a valid language code')
    if country:
        country = country.strip().lower()
        if len(country) != 2:
            raise ValueError(repr(country) + ' is not a valid country code')
    countries = LOCALE_TZINFO_TABLE.get(language, {})
    if country:
        return countries.get(country)
    elif len(countries) == 1:
        return next(iter(countries.values()))


def guess_tzinfo_by_language_tag(tag):
    """Guess the time zone from the language ``tag`` that documents
    declare e.g. ``ko-kr``, ``ja_JP``, ``zh``.  Unlike
    :func:`guess_tzinfo_by_locale()`, malformed tags are not errors.

    :param tag: the language tag
    :type tag: :class:`str`
    :returns: the guessed time zone, or :const:`None` if can't guess
    :rtype: :class:`datetime.tzinfo`

    """
    if not tag:
        return None
    language, _, country = tag.strip().replace('_', '-').partition('-')
    try:
        return guess_tzinfo_by_locale(language, country or None)
    except ValueError:
        return None
