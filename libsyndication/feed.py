""":mod:`libsyndication.feed` --- Atom feeds and entries
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for Atom (:rfc:`4287`) and its 0.3 draft.  Both versions
fill the same objects; the draft's elements are mapped to their Atom 1.0
counterparts (e.g. ``tagline`` to :attr:`AtomFeed.subtitle`, ``modified``
to :attr:`AtomFeed.updated_at`).

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = ('AtomEntry', 'AtomFeed', 'Category', 'Content', 'Generator',
           'Link', 'Person', 'Text')


class Text(Element):
    """Text construct defined in :rfc:`4287#section-3.1` (section 3.1)."""

    #: (:class:`str`) The type of the text.  It could be one of ``'text'``,
    #: ``'html'``, or ``'xhtml'``.
    type = Value(default='text')

    #: (:class:`str`) The content of the text.  Interpretation for this
    #: has to differ according to its :attr:`type`.
    value = Value()

    def __str__(self):
        return self.value or ''


class Person(Element):
    """Person construct defined in :rfc:`4287#section-3.2` (section 3.2)."""

    #: (:class:`str`) The human-readable name for the person.
    name = Value()

    #: (:class:`str`) The optional URI associated with the person.
    uri = Value()

    #: (:class:`str`) The optional email address associated with the person.
    email = Value()

    def __str__(self):
        ref = self.uri or self.email
        if ref:
            return '{0} <{1}>'.format(self.name, ref)
        return self.name or ''


class Link(Element):
    """Link element defined in :rfc:`4287#section-4.2.7` (section 4.2.7)."""

    #: (:class:`str`) The link's required URI.
    uri = Value()

    #: (:class:`str`) The relation type of the link.
    relation = Value(default='alternate')

    #: (:class:`str`) The optional hint for the MIME media type of the linked
    #: content.
    mimetype = Value()

    #: (:class:`str`) The language of the linked content.
    language = Value()

    #: (:class:`str`) The title of the linked resource.
    title = Value()

    #: (:class:`int`) The optional hint for the length of the linked content
    #: in octets.
    byte_size = Value()

    def __str__(self):
        return self.uri or ''


class Category(Element):
    """Category element defined in :rfc:`4287#section-4.2.2` (section
    4.2.2).

    """

    #: (:class:`str`) The identifier of the category.
    term = Value()

    #: (:class:`str`) The URI that identifies a categorization scheme.
    scheme_uri = Value()

    #: (:class:`str`) The human-readable label of the category.
    label = Value()


class Content(Text):
    """Content element defined in :rfc:`4287#section-4.1.3` (section
    4.1.3).

    """

    #: (:class:`str`) The optional URI of the content.  The :attr:`value`
    #: is empty when it's present.
    source_uri = Value()


class Generator(Element):
    """Identify the agent used to generate a feed."""

    #: (:class:`str`) The human-readable name of the generator.
    value = Value()

    #: (:class:`str`) The optional URI of the generator.
    uri = Value()

    #: (:class:`str`) The optional version of the generator.
    version = Value()


class AtomEntry(SyndicationResource):
    """Represent an individual entry, acting as a container for metadata
    and data associated with the entry.  It can be a standalone Atom
    document as well.

    """

    resource_format = FormatKind.ATOM
    resource_kind = 'entry'

    #: (:class:`str`) The URI that conveys a permanent, universally unique
    #: identifier for the entry.
    id = Value()

    #: (:class:`Text`) The human-readable title.
    title = Value()

    #: (:class:`datetime.datetime`) The most recent instant in time when
    #: the entry was modified in a way the publisher considers significant.
    updated_at = Value()

    #: (:class:`datetime.datetime`) The instant in time associated with
    #: an event early in the life cycle of the entry.
    published_at = Value()

    #: (:class:`collections.MutableSequence`) The list of :class:`Person`
    #: values which indicate the authors.
    authors = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Person`
    #: values which indicate the contributors.
    contributors = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Link`.
    links = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Category`.
    categories = ValueList()

    #: (:class:`Content`) The content of the entry.
    content = Value()

    #: (:class:`Text`) The summary of the entry.
    summary = Value()

    #: (:class:`Text`) The information about rights held in and over
    #: the entry.
    rights = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()


class AtomFeed(SyndicationResource):
    """Atom feed document, acting as a container for metadata and data
    associated with the feed.

    """

    resource_format = FormatKind.ATOM
    resource_kind = 'feed'

    #: (:class:`str`) The URI that conveys a permanent, universally unique
    #: identifier for the feed.
    id = Value()

    #: (:class:`Text`) The human-readable title.
    title = Value()

    #: (:class:`Text`) The human-readable description or subtitle.
    subtitle = Value()

    #: (:class:`datetime.datetime`) The most recent instant in time when
    #: the feed was modified.
    updated_at = Value()

    #: (:class:`collections.MutableSequence`) The list of :class:`Person`
    #: values which indicate the authors.
    authors = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Person`
    #: values which indicate the contributors.
    contributors = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Link`.
    links = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`Category`.
    categories = ValueList()

    #: (:class:`Generator`) The agent used to generate the feed.
    generator = Value()

    #: (:class:`str`) The URI of an image that provides iconic visual
    #: identification for the feed.
    icon = Value()

    #: (:class:`str`) The URI of an image that provides visual
    #: identification for the feed.
    logo = Value()

    #: (:class:`Text`) The information about rights held in and over
    #: the feed.
    rights = Value()

    #: (:class:`collections.MutableSequence`) The list of :class:`AtomEntry`.
    entries = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
