""":mod:`libsyndication.registry` --- Registry of parser variants
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

The registry maps every supported pair of format and version to its
:class:`~libsyndication.parser.base.ParserVariant`.  It's built once and
never changes, so it can be shared by threads without locking.

Lookups are exact: ``(RSS, 2.0)`` never falls back to ``(RSS, 0.92)``.

"""
import collections.abc
import types

from .format import AdapterKey, FormatKind
from .parser.apml import APML06
from .parser.atom import ATOM03, ATOM10
from .parser.base import ParserVariant
from .parser.blogml import BLOGML20
from .parser.opml import OPML10, OPML11, OPML20
from .parser.rsd import RSD06, RSD10
from .parser.rss import RSS090, RSS091, RSS092, RSS10, RSS20

__all__ = 'REGISTRY', 'AdapterRegistry', 'resolve', 'supported_versions'


class AdapterRegistry(collections.abc.Mapping):
    """Immutable mapping of :class:`~libsyndication.format.AdapterKey` to
    :class:`~libsyndication.parser.base.ParserVariant`.

    :param variants: parser variants to register.  each is keyed by its
                     own :attr:`~libsyndication.parser.base.ParserVariant.key`
    :type variants: :class:`collections.abc.Iterable`
    :raises ValueError: when two variants have the same key

    """

    __slots__ = '_variants',

    def __init__(self, variants):
        table = {}
        for variant in variants:
            if not isinstance(variant, ParserVariant):
                raise TypeError(
                    'expected a {0.__module__}.{0.__name__}, not '
                    '{1!r}'.format(ParserVariant, variant)
                )
            elif variant.key in table:
                raise ValueError('duplicate parser variants for '
                                 '{0.format} {0.version}'.format(variant))
            table[variant.key] = variant
        self._variants = types.MappingProxyType(table)

    def resolve(self, key):
        """Find the parser variant for the given ``key``.

        :param key: the pair of format and version
        :type key: :class:`~libsyndication.format.AdapterKey`
        :returns: the parser variant, or :const:`None` if the version of
                  the format isn't supported
        :rtype: :class:`~libsyndication.parser.base.ParserVariant`

        """
        if key is None or key[1] is None:
            return None
        return self._variants.get(AdapterKey(*key))

    def supported_versions(self, format):
        """Versions of the ``format`` that the registry can parse.

        :param format: the format
        :type format: :class:`~libsyndication.format.FormatKind`
        :returns: the set of versions
        :rtype: :class:`frozenset`

        """
        return frozenset(key.version for key in self._variants
                         if key.format is format)

    @property
    def formats(self):
        """(:class:`frozenset`) The set of formats in the registry."""
        return frozenset(key.format for key in self._variants)

    def __getitem__(self, key):
        return self._variants[key]

    def __iter__(self):
        return iter(self._variants)

    def __len__(self):
        return len(self._variants)

    def __repr__(self):
        return '<{0.__module__}.{0.__name__} {1}>'.format(
            type(self),
            ', '.join('{0} {1}'.format(key.format, key.version)
                      for key in sorted(self._variants,
                                        key=lambda k: (k.format.value,
                                                       k.version.parts)))
        )


#: (:class:`AdapterRegistry`) Every parser variant the library ships.
REGISTRY = AdapterRegistry([
    APML06,
    ATOM03, ATOM10,
    BLOGML20,
    OPML10, OPML11, OPML20,
    RSD06, RSD10,
    RSS090, RSS091, RSS092, RSS10, RSS20,
])


def resolve(key):
    """Find the parser variant for the ``key`` in :const:`REGISTRY`.

    >>> from libsyndication.format import Version
    >>> resolve(AdapterKey(FormatKind.RSS, Version(2, 0)))
    <libsyndication.parser.base.ParserVariant RSS 2.0 (feed)>
    >>> resolve(AdapterKey(FormatKind.RSS, Version(0, 5))) is None
    True

    """
    return REGISTRY.resolve(key)


def supported_versions(format):
    """Versions of the ``format`` in :const:`REGISTRY`."""
    return REGISTRY.supported_versions(format)
