""":mod:`libsyndication.parser.base` --- Base parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Common interfaces used in every parser variant.

"""
import collections.abc
import copy
import logging

from ..compat.etree import is_element
from ..format import AdapterKey, FormatKind, Version
from ..resource import Extension, split_tag
from ..schema import Element, ValueList
from ..settings import LoadSettings
from ..tz import utc

__all__ = ('ParserBase', 'ParserVariant', 'Session', 'collect',
           'get_element_id')


def get_element_id(namespace, element_name):
    """Make an ElementTree-style tag from the given ``namespace`` and
    ``element_name``.

    >>> get_element_id('http://www.w3.org/2005/Atom', 'feed')
    '{http://www.w3.org/2005/Atom}feed'
    >>> get_element_id(None, 'rss')
    'rss'

    """
    if namespace:
        return '{' + namespace + '}' + element_name
    return element_name


class Session(object):
    """The additional data which are needed for parsing the elements.
    For example, an xml:base is needed to retrieve the full uri when an
    relative uri is given in the Atom element.
    A session object is passed from root parser to its children parsers, and
    a change of the session only affects in the parser
    where the change occurs and its children parsers, except for
    the counters of the whole document which all copies share.

    :param settings: the load settings
    :type settings: :class:`~libsyndication.settings.LoadSettings`
    :param namespaces: the XML namespaces the parser variant understands.
                       unknown elements in other namespaces become
                       extensions
    :type namespaces: :class:`collections.abc.Iterable`
    :param xml_base: the base uri to resolve relative uris
    :type xml_base: :class:`str`

    """

    #: (:class:`~libsyndication.settings.LoadSettings`) The load settings.
    settings = None

    #: (:class:`frozenset`) The XML namespaces the parser understands.
    namespaces = frozenset()

    #: (:class:`str`) The base uri in effect.
    xml_base = None

    #: (:class:`datetime.tzinfo`) The time zone of timestamps that lack it.
    default_tzinfo = utc

    def __init__(self, settings, namespaces=(), xml_base=None):
        self.settings = settings
        self.namespaces = frozenset(namespaces)
        self.xml_base = xml_base
        self.counters = {'extensions': 0}

    def accepts(self, values):
        """Whether one more value can be appended to the given list of
        ``values`` according to
        :attr:`~libsyndication.settings.LoadSettings.entity_limit`.

        """
        limit = self.settings.entity_limit
        if limit is None or len(values) < limit:
            return True
        logger = logging.getLogger(__name__ + '.Session.accepts')
        logger.debug('entity limit (%d) reached; the rest are ignored', limit)
        return False

    def keep_extension(self, owner, element):
        """Try keeping the unexpected ``element`` as an
        :class:`~libsyndication.resource.Extension` of the ``owner``.
        Only elements of foreign namespaces are kept, and only if
        the ``owner`` has ``extensions`` and the settings allow.

        :returns: whether the element has been kept
        :rtype: :class:`bool`

        """
        logger = logging.getLogger(__name__ + '.Session.keep_extension')
        namespace, _ = split_tag(element.tag)
        if namespace is None or namespace in self.namespaces:
            logger.debug('unexpected element: %s', element.tag)
            return False
        descriptor = getattr(type(owner), 'extensions', None)
        if not isinstance(descriptor, ValueList) or \
           not self.settings.extensions_enabled:
            return False
        if self.counters['extensions'] >= \
           self.settings.max_extension_elements:
            logger.debug('too many extension elements; %s is ignored',
                          element.tag)
            return False
        owner.extensions.append(Extension.from_element(element))
        self.counters['extensions'] += 1
        return True


class ParserBase(object):
    """The ParserBase object purposes to define parsers. Defined parsers
    take an XML element, and then return a parsed
    :class:`~libsyndication.schema.Element` object.
    Every parser is defined together with a path(e.g. ``'channel/item'``) of
    elements to take through :meth:`path()` decorator.

    Every decorated function becomes to a *child* parser of the parser that
    decorats it.  A child parser that returns a :class:`list` puts all of
    its values into the multiple attribute of its parent.  ::

        rss_parser = ParserBase()

        @rss_parser.path('channel')
        def channel_parser(element, session):
            # ...

        @channel_parser.path('item')
        def item_parser(element, session):
            # ...

    Decorating a parser that is already a :class:`ParserBase` reuses it,
    so a parser can be a child of several parents sharing its own
    children.

    """

    def __init__(self, parser=None):
        if parser:
            self.parser = parser
        self.children_parser = {}

    def __call__(self, root_element, session):
        """The parsing starts when a root parser is called.
        When parsing, the root parser parses an element designated to itself
        and it passes the children elements to the children parsers.

        :param root_element: An XML element to be parsed.
        :type root_element: :class:`xml.etree.ElementTree.Element`
        :param session: The additional data which help parsing the element.
        :type session: :class:`Session`

        """
        root, root_session = self.parser(root_element, session)
        if not isinstance(root, Element):
            return root
        for element in root_element:
            if not is_element(element):
                continue
            try:
                parser, attr_name = self.children_parser[element.tag]
            except KeyError:
                root_session.keep_extension(root, element)
                continue
            descriptor = getattr(type(root), attr_name)
            if descriptor.multiple and \
               not root_session.accepts(getattr(root, attr_name)):
                continue
            child = parser(element, copy.copy(root_session))
            if child is None:
                continue
            if descriptor.multiple:
                values = getattr(root, attr_name)
                if isinstance(child, list):
                    for value in child:
                        if not root_session.accepts(values):
                            break
                        values.append(value)
                else:
                    values.append(child)
            else:
                setattr(root, attr_name, child)
        return root

    def register(self, element_name, parser, attr_name=None,
                 namespace_set=None):
        """Register the ``parser`` as a child parser for elements named
        ``element_name``.

        :param element_name: the local name of the element
        :type element_name: :class:`str`
        :param parser: the child parser
        :type parser: :class:`ParserBase`
        :param attr_name: the descriptor attribute name of the parent
                          element to put the parsed value into.
                          ``element_name`` by default
        :type attr_name: :class:`str`
        :param namespace_set: the XML namespaces of the element.
                              no namespace if omitted
        :type namespace_set: :class:`collections.abc.Iterable`

        """
        entry = parser, attr_name or element_name
        if isinstance(namespace_set, collections.abc.Iterable):
            for namespace in namespace_set:
                self.children_parser[get_element_id(namespace,
                                                    element_name)] = entry
        else:
            self.children_parser[element_name] = entry
        return parser

    def path(self, element_name, namespace_set=None, attr_name=None):
        """The decorator function to define a parser in the top of
        parser hierarchy or its children parsers.

        :param element_name: The element id. It consists of an xml namespace
                             and an element name. The parser should return
                             a value for the element.
        :type element_name: :class:`str`
        :param namespace_set: The XML namespaces of the element.
        :type namespace_set: :class:`collections.abc.Iterable`
        :param attr_name: The descriptor attribute name of the parent
                          :class:`~libsyndication.schema.Element` for
                          the designated element.
        :type attr_name: :class:`str`

        """

        def decorator(func):
            parser = func if isinstance(func, ParserBase) else ParserBase(func)
            return self.register(element_name, parser, attr_name,
                                 namespace_set)

        return decorator


class ParserVariant(object):
    """A parser for a specific pair of format and version.  It offers
    one entry point per resource kind it can fill e.g. ``feed`` and
    ``entry`` for Atom::

        atom10 = ParserVariant(FormatKind.ATOM, Version(1, 0),
                               namespaces=[ATOM_XMLNS],
                               feed=parse_feed, entry=parse_entry)

    Every entry point takes the root element and a :class:`Session`, and
    returns a newly made resource.

    :param format: the format of the variant
    :type format: :class:`~libsyndication.format.FormatKind`
    :param version: the version of the variant
    :type version: :class:`~libsyndication.format.Version`
    :param namespaces: the XML namespaces the variant understands
    :type namespaces: :class:`collections.abc.Iterable`

    """

    def __init__(self, format, version, namespaces=(), **entry_points):
        if not isinstance(format, FormatKind) or \
           format is FormatKind.UNKNOWN:
            raise TypeError('format must be a known {0.__module__}.'
                            '{0.__name__}, not {1!r}'.format(FormatKind,
                                                              format))
        elif not isinstance(version, Version):
            raise TypeError('version must be a {0.__module__}.{0.__name__}, '
                            'not {1!r}'.format(Version, version))
        elif not entry_points:
            raise TypeError('at least one entry point is required')
        for kind, entry_point in entry_points.items():
            if not callable(entry_point):
                raise TypeError('entry point {0!r} is not callable: '
                                '{1!r}'.format(kind, entry_point))
        self.format = format
        self.version = version
        self.namespaces = frozenset(namespaces)
        self.entry_points = dict(entry_points)

    @property
    def key(self):
        """(:class:`~libsyndication.format.AdapterKey`) The registry key
        of the variant.

        """
        return AdapterKey(self.format, self.version)

    def entry_point(self, kind):
        """Get the entry point for the resource ``kind``.

        :returns: the entry point, or :const:`None` if the variant cannot
                  fill resources of the ``kind``
        :rtype: :class:`collections.abc.Callable`

        """
        return self.entry_points.get(kind)

    def parse(self, kind, root_element, settings=None):
        """Parse the ``root_element`` into a new resource of the ``kind``.

        :param kind: the resource kind e.g. ``'feed'``
        :type kind: :class:`str`
        :param root_element: the root element of the document
        :param settings: the load settings.  default settings if omitted
        :type settings: :class:`~libsyndication.settings.LoadSettings`
        :returns: the parsed resource
        :rtype: :class:`~libsyndication.resource.SyndicationResource`
        :raises KeyError: when the variant has no entry point for
                          the ``kind``

        """
        entry_point = self.entry_points[kind]
        session = Session(settings or LoadSettings(), self.namespaces)
        return entry_point(root_element, session)

    def __repr__(self):
        return '<{0.__module__}.{0.__name__} {1} {2} ({3})>'.format(
            type(self), self.format, self.version,
            ', '.join(sorted(self.entry_points))
        )


def collect(parser, element_name, namespace_set=None):
    """Make a parser of container elements e.g. ``<posts>`` that parses
    the children named ``element_name`` with the ``parser`` and returns
    the list of them, as many as
    :attr:`~libsyndication.settings.LoadSettings.entity_limit` allows::

        root.register('posts', ParserBase(collect(post_parser, 'post')))

    :param parser: the parser of each child
    :type parser: :class:`ParserBase`
    :param element_name: the local name of children
    :type element_name: :class:`str`
    :param namespace_set: the XML namespaces of children.
                          no namespace if omitted
    :type namespace_set: :class:`collections.abc.Iterable`
    :returns: the parser function of the container
    :rtype: :class:`collections.abc.Callable`

    """
    if namespace_set is None:
        tags = frozenset([element_name])
    else:
        tags = frozenset(get_element_id(namespace, element_name)
                         for namespace in namespace_set)

    def parse(element, session):
        values = []
        for child in element:
            if not is_element(child) or child.tag not in tags:
                continue
            elif not session.accepts(values):
                break
            value = parser(child, copy.copy(session))
            if value is not None:
                values.append(value)
        return values, session

    return parse
