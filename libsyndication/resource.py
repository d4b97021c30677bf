""":mod:`libsyndication.resource` --- Syndication resources
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Every document object that :func:`libsyndication.adapter.fill()` can
fill is a :class:`SyndicationResource`.  Each concrete resource type is
tagged with the :class:`~libsyndication.format.FormatKind` it belongs to
and its *kind* (e.g. ``'feed'`` or ``'entry'`` for Atom), and the tags
are what the dispatcher matches against, not the Python type.

"""
from .compat.etree import is_element
from .schema import Element, Value, ValueList

__all__ = 'Extension', 'SyndicationResource', 'split_tag'


def split_tag(tag):
    """Split the ElementTree-style ``tag`` e.g. ``'{xmlns}name'`` into
    a pair of namespace and local name.

    >>> split_tag('{http://www.w3.org/2005/Atom}feed')
    ('http://www.w3.org/2005/Atom', 'feed')
    >>> split_tag('rss')
    (None, 'rss')

    """
    if tag.startswith('{'):
        namespace, name = tag[1:].split('}', 1)
        return namespace, name
    return None, tag


class Extension(Element):
    """An element that no parser variant understands, e.g. elements of
    syndication extension modules like ``itunes:`` or ``media:``.  These
    are kept as a plain tree while the load settings allow.

    """

    #: (:class:`str`) The XML namespace of the element.
    namespace = Value()

    #: (:class:`str`) The local name of the element.
    name = Value()

    #: (:class:`str`) The text of the element.
    text = Value()

    #: (:class:`dict`) The attributes of the element.
    attributes = Value()

    #: (:class:`collections.MutableSequence`) The child
    #: :class:`Extension` elements.
    children = ValueList()

    @classmethod
    def from_element(cls, element):
        """Make an :class:`Extension` from the given XML ``element``,
        recursively.

        """
        namespace, name = split_tag(element.tag)
        text = element.text
        if text is not None:
            text = text.strip() or None
        return cls(
            namespace=namespace,
            name=name,
            text=text,
            attributes=dict(element.attrib),
            children=[cls.from_element(child)
                      for child in element if is_element(child)]
        )


class SyndicationResource(Element):
    """Abstract base class of the document objects to be filled.

    Subclasses have to set :attr:`resource_format` and, when a format has
    more than one kind of resource, :attr:`resource_kind`.

    """

    #: (:class:`~libsyndication.format.FormatKind`) The format the resource
    #: belongs to.
    resource_format = None

    #: (:class:`str`) The kind of the resource within its format.
    #: Parser variants offer one entry point per kind.
    resource_kind = 'document'

    def load_state(self, other):
        """Replace the whole state of the resource with the state of
        ``other``.  Either of the two has to be an instance of the type of
        the other, so a resource of a subclass of a document type can take
        the state of a freshly parsed resource of the document type, and
        vice versa.  It's how a freshly parsed resource becomes visible
        through the caller's object.

        :param other: the resource to take the state from
        :type other: :class:`SyndicationResource`

        """
        if not (isinstance(other, type(self)) or
                isinstance(self, type(other))) or \
           (other.resource_format, other.resource_kind) != \
           (self.resource_format, self.resource_kind):
            raise TypeError(
                'expected an instance of {0.__module__}.{0.__name__}, '
                'not {1!r}'.format(type(self), other)
            )
        self._data = other._data
