""":mod:`libsyndication.format` --- Formats and versions
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

The closed set of syndication formats, their versions, and the XML
namespaces that identify them.

"""
import collections
import enum
import re

__all__ = ('APML_XMLNS', 'ATOM03_XMLNS', 'ATOM_XMLNS', 'AdapterKey',
           'BLOGML_XMLNS', 'CONTENT_XMLNS', 'DC_XMLNS', 'Fingerprint',
           'FormatKind', 'RDF_XMLNS', 'RSD_XMLNS', 'RSS090_XMLNS',
           'RSS10_XMLNS', 'UNKNOWN_FINGERPRINT', 'Version', 'XML_XMLNS',
           'parse_version')


#: (:class:`str`) The XML namespace used for APML 0.6.
APML_XMLNS = 'http://www.apml.org/apml-0.6'

#: (:class:`str`) The XML namespace used for Atom 1.0 (:rfc:`4287`).
ATOM_XMLNS = 'http://www.w3.org/2005/Atom'

#: (:class:`str`) The XML namespace used for the Atom 0.3 draft.
ATOM03_XMLNS = 'http://purl.org/atom/ns#'

#: (:class:`str`) The XML namespace used for BlogML 2.0.
BLOGML_XMLNS = 'http://www.blogml.com/2006/09/BlogML'

#: (:class:`str`) The XML namespace used for RSD 1.0.
RSD_XMLNS = 'http://archipelago.phrasewise.com/rsd'

#: (:class:`str`) The XML namespace of RDF, the root of RSS 0.9 and 1.0.
RDF_XMLNS = 'http://www.w3.org/1999/02/22-rdf-syntax-ns#'

#: (:class:`str`) The XML namespace used for RSS 0.9.
RSS090_XMLNS = 'http://my.netscape.com/rdf/simple/0.9/'

#: (:class:`str`) The XML namespace used for RSS 1.0.
RSS10_XMLNS = 'http://purl.org/rss/1.0/'

#: (:class:`str`) The XML namespace for the predefined ``dc:`` prefix.
DC_XMLNS = 'http://purl.org/dc/elements/1.1/'

#: (:class:`str`) The XML namespace for the predefined ``content:`` prefix.
CONTENT_XMLNS = 'http://purl.org/rss/1.0/modules/content/'

#: (:class:`str`) The XML namespace for the predefined ``xml:`` prefix.
XML_XMLNS = 'http://www.w3.org/XML/1998/namespace'


class FormatKind(enum.Enum):
    """The syndication formats.  :attr:`UNKNOWN` is what a document
    without any recognizable fingerprint is.

    """

    APML = 'apml'
    ATOM = 'atom'
    BLOGML = 'blogml'
    OPML = 'opml'
    RSD = 'rsd'
    RSS = 'rss'
    UNKNOWN = 'unknown'

    def __str__(self):
        return self.name


class Version(object):
    """Dotted numeric version e.g. ``0.91``, ``2.0``.  It consists of
    at least major and minor numbers.  Versions are compared by exact
    equality only: ``Version(0, 9)`` and ``Version(0, 90)`` are different
    versions, and so are ``Version(2, 0)`` and ``Version(2, 0, 1)``.

    >>> Version.parse('0.91')
    libsyndication.format.Version('0.91')
    >>> Version.parse('0.91') == Version(0, 91)
    True

    """

    __slots__ = 'parts',

    #: (:class:`re.RegexObject`) The pattern of valid version strings.
    PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)+)\s*$')

    def __init__(self, *parts):
        if len(parts) < 2:
            raise TypeError('version requires at least major and minor '
                            'numbers, not ' + repr(parts))
        for part in parts:
            if not isinstance(part, int) or isinstance(part, bool) or \
               part < 0:
                raise TypeError('version numbers must be non-negative '
                                'integers, not ' + repr(part))
        self.parts = tuple(parts)

    @classmethod
    def parse(cls, string):
        """Parse the given version ``string``.

        :param string: dotted version string e.g. ``'2.0'``
        :type string: :class:`str`
        :returns: the parsed version
        :rtype: :class:`Version`
        :raises ValueError: when the string is not a dotted numeric version

        """
        if not isinstance(string, str):
            raise TypeError('expected a string, not ' + repr(string))
        match = cls.PATTERN.match(string)
        if not match:
            raise ValueError(repr(string) + ' is not a valid version')
        return cls(*(int(part) for part in match.group(1).split('.')))

    @property
    def major(self):
        """(:class:`int`) The major number."""
        return self.parts[0]

    @property
    def minor(self):
        """(:class:`int`) The minor number."""
        return self.parts[1]

    def __eq__(self, other):
        return isinstance(other, Version) and self.parts == other.parts

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.parts)

    def __str__(self):
        return '.'.join(str(part) for part in self.parts)

    def __repr__(self):
        return '{0.__module__}.{0.__name__}({1!r})'.format(type(self),
                                                           str(self))


def parse_version(string):
    """Parse the given version ``string`` if it's valid.

    :param string: dotted version string.  it can be :const:`None`
    :type string: :class:`str`
    :returns: the parsed version, or :const:`None` if ``string`` is missing
              or not a valid version
    :rtype: :class:`Version`

    """
    if string is None:
        return None
    try:
        return Version.parse(string)
    except ValueError:
        return None


#: Namedtuple which is a pair of ``format`` and ``version``, used only
#: to look up parser variants from the registry.
AdapterKey = collections.namedtuple('AdapterKey', 'format version')


class Fingerprint(collections.namedtuple('Fingerprint', 'format version')):
    """The pair of :class:`FormatKind` and :class:`Version` inferred from
    a document.  Its ``version`` is :const:`None` when the format is
    :attr:`FormatKind.UNKNOWN`, or when the format is recognized but its
    version indicator is missing or malformed.

    """

    __slots__ = ()

    def __new__(cls, format, version=None):
        if not isinstance(format, FormatKind):
            raise TypeError('format must be a {0.__module__}.{0.__name__}, '
                            'not {1!r}'.format(FormatKind, format))
        elif not (version is None or isinstance(version, Version)):
            raise TypeError('version must be a {0.__module__}.{0.__name__}, '
                            'not {1!r}'.format(Version, version))
        if format is FormatKind.UNKNOWN:
            version = None
        return super(Fingerprint, cls).__new__(cls, format, version)

    @property
    def key(self):
        """(:class:`AdapterKey`) The registry key for the fingerprint."""
        return AdapterKey(self.format, self.version)

    @property
    def recognized(self):
        """(:class:`bool`) Whether the format is recognized."""
        return self.format is not FormatKind.UNKNOWN


#: (:class:`Fingerprint`) The fingerprint of unrecognizable documents.
UNKNOWN_FINGERPRINT = Fingerprint(FormatKind.UNKNOWN)
