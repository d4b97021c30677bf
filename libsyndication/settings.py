""":mod:`libsyndication.settings` --- Load settings
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:class:`LoadSettings` is the configuration threaded through every parser
variant.  It is an immutable value: use :meth:`LoadSettings.replace()` to
derive a different one.  ::

    settings = LoadSettings(character_encoding='euc-kr', entity_limit=50)
    strict = settings.replace(strict_versions=True)

Settings can also be built from string-valued configuration e.g.
a section of :mod:`configparser`::

    parser = configparser.ConfigParser()
    parser.read('app.ini')
    settings = LoadSettings.from_mapping(parser['syndication'])

"""
import codecs
import numbers

from .codecs import Boolean, DecodeError, Integer

__all__ = 'DEFAULT_MAX_EXTENSION_ELEMENTS', 'LoadSettings', 'SettingsError'


#: (:class:`int`) The default number of extension elements kept per
#: document.
DEFAULT_MAX_EXTENSION_ELEMENTS = 100


class SettingsError(ValueError):
    """Rise when a load setting has an invalid value."""


class LoadSettings(object):
    """The immutable set of options to configure filling documents.

    :param character_encoding: the name of the character encoding to
                               decode raw documents with, overriding
                               the encoding the document declares
    :type character_encoding: :class:`str`
    :param max_extension_elements: the maximum number of extension
                                   elements to keep per document
    :type max_extension_elements: :class:`numbers.Integral`
    :param entity_limit: the maximum number of repeated child elements
                         (entries, items, outlines, posts, ...) to read
                         into each list.  :const:`None` means unbounded
    :type entity_limit: :class:`numbers.Integral`
    :param extensions_enabled: whether to keep extension elements at all
    :type extensions_enabled: :class:`bool`
    :param strict_versions: whether to raise
                            :exc:`~libsyndication.adapter.UnsupportedVersionError`
                            for recognized formats of unsupported versions
                            instead of leaving the target untouched
    :type strict_versions: :class:`bool`

    """

    __slots__ = ('_character_encoding', '_max_extension_elements',
                 '_entity_limit', '_extensions_enabled', '_strict_versions')

    #: (:class:`tuple`) The names of all options.
    OPTIONS = ('character_encoding', 'max_extension_elements', 'entity_limit',
               'extensions_enabled', 'strict_versions')

    def __init__(self, character_encoding=None,
                 max_extension_elements=DEFAULT_MAX_EXTENSION_ELEMENTS,
                 entity_limit=None, extensions_enabled=True,
                 strict_versions=False):
        if character_encoding is not None:
            if not isinstance(character_encoding, str):
                raise TypeError('character_encoding must be a string, not ' +
                                repr(character_encoding))
            try:
                codecs.lookup(character_encoding)
            except LookupError:
                raise SettingsError('unknown character encoding: ' +
                                    repr(character_encoding))
        if not isinstance(max_extension_elements, numbers.Integral) or \
           isinstance(max_extension_elements, bool):
            raise TypeError('max_extension_elements must be an integer, '
                            'not ' + repr(max_extension_elements))
        elif max_extension_elements < 0:
            raise SettingsError('max_extension_elements cannot be negative')
        if entity_limit is not None:
            if not isinstance(entity_limit, numbers.Integral) or \
               isinstance(entity_limit, bool):
                raise TypeError('entity_limit must be an integer or None, '
                                'not ' + repr(entity_limit))
            elif entity_limit < 1:
                raise SettingsError('entity_limit must be positive')
        self._character_encoding = character_encoding
        self._max_extension_elements = int(max_extension_elements)
        if entity_limit is not None:
            entity_limit = int(entity_limit)
        self._entity_limit = entity_limit
        self._extensions_enabled = bool(extensions_enabled)
        self._strict_versions = bool(strict_versions)

    @property
    def character_encoding(self):
        """(:class:`str`) The character encoding override, or :const:`None`
        to follow the encoding the document declares.

        """
        return self._character_encoding

    @property
    def max_extension_elements(self):
        """(:class:`int`) The maximum number of extension elements to keep
        per document.

        """
        return self._max_extension_elements

    @property
    def entity_limit(self):
        """(:class:`int`) The maximum number of repeated child elements to
        read into each list, or :const:`None` if unbounded.

        """
        return self._entity_limit

    @property
    def extensions_enabled(self):
        """(:class:`bool`) Whether to keep extension elements."""
        return self._extensions_enabled

    @property
    def strict_versions(self):
        """(:class:`bool`) Whether unsupported versions of recognized
        formats are errors.

        """
        return self._strict_versions

    def replace(self, **changes):
        """Make a copy of the settings with the given ``changes``.

        :returns: a new settings object
        :rtype: :class:`LoadSettings`

        """
        for name in changes:
            if name not in self.OPTIONS:
                raise TypeError(repr(name) + ' is not a load setting')
        options = dict((name, getattr(self, name)) for name in self.OPTIONS)
        options.update(changes)
        return type(self)(**options)

    @classmethod
    def from_mapping(cls, mapping):
        """Build settings from the given ``mapping`` of option names to
        values.  Hyphens in option names are treated as underscores,
        and string values are decoded, so it works with configuration
        files as well::

            LoadSettings.from_mapping({
                'character-encoding': 'utf-8',
                'entity-limit': '100',
                'strict-versions': 'yes'
            })

        :param mapping: option names to values
        :type mapping: :class:`collections.abc.Mapping`
        :returns: the settings
        :rtype: :class:`LoadSettings`
        :raises SettingsError: when there's an unknown option or a value
                               cannot be decoded

        """
        integer = Integer()
        boolean = Boolean(true=('true', 'yes', 'on', '1'),
                          false=('false', 'no', 'off', '0'))
        options = {}
        for key, value in mapping.items():
            name = key.strip().lower().replace('-', '_')
            if name not in cls.OPTIONS:
                raise SettingsError(repr(key) + ' is not a load setting')
            if isinstance(value, str):
                value = value.strip()
                try:
                    if name == 'character_encoding':
                        value = value or None
                    elif name == 'entity_limit':
                        if value.lower() in ('', 'none', 'unlimited'):
                            value = None
                        else:
                            value = integer.decode(value)
                    elif name == 'max_extension_elements':
                        value = integer.decode(value)
                    else:
                        value = boolean.decode(value)
                except DecodeError as e:
                    raise SettingsError('{0}: {1}'.format(key, e))
            options[name] = value
        return cls(**options)

    def __eq__(self, other):
        return isinstance(other, LoadSettings) and all(
            getattr(self, name) == getattr(other, name)
            for name in self.OPTIONS
        )

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in self.OPTIONS))

    def __repr__(self):
        return '{0.__module__}.{0.__name__}({1})'.format(
            type(self),
            ', '.join('{0}={1!r}'.format(name, getattr(self, name))
                      for name in self.OPTIONS)
        )
