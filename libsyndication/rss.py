""":mod:`libsyndication.rss` --- RSS feeds
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for the RSS family: the RDF-based RSS 0.9 and 1.0, and
the RSS 0.91, 0.92 and 2.0 lineage.  They share one model; which fields
are filled depends on what the version of the document defines.

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = ('RssCategory', 'RssChannel', 'RssCloud', 'RssEnclosure', 'RssFeed',
           'RssGuid', 'RssImage', 'RssItem', 'RssSource', 'RssTextInput')


class RssCategory(Element):
    """Category of a channel or an item."""

    #: (:class:`str`) The hierarchic location in the taxonomy.
    value = Value()

    #: (:class:`str`) The domain that identifies the taxonomy.
    domain = Value()


class RssCloud(Element):
    """Web service that supports the ``rssCloud`` interface, to be notified
    of updates to the channel.

    """

    domain = Value()

    #: (:class:`int`) The port number.
    port = Value()

    path = Value()

    register_procedure = Value()

    protocol = Value()


class RssImage(Element):
    """Image that can be displayed with the channel."""

    #: (:class:`str`) The URL of the image.
    url = Value()

    title = Value()

    #: (:class:`str`) The URL of the site the image links to.
    link = Value()

    #: (:class:`int`) The width in pixels.
    width = Value()

    #: (:class:`int`) The height in pixels.
    height = Value()

    description = Value()


class RssTextInput(Element):
    """Text input box that can be displayed with the channel."""

    title = Value()

    description = Value()

    #: (:class:`str`) The name of the text object.
    name = Value()

    #: (:class:`str`) The URL of the script that processes the requests.
    link = Value()


class RssEnclosure(Element):
    """Media object attached to an item."""

    url = Value()

    #: (:class:`int`) The size in bytes.
    length = Value()

    mimetype = Value()


class RssGuid(Element):
    """String that uniquely identifies an item."""

    value = Value()

    #: (:class:`bool`) Whether the guid is a permanent URL of the item.
    is_permalink = Value(default=True)


class RssSource(Element):
    """The channel an item came from."""

    #: (:class:`str`) The URL of the channel's XML.
    url = Value()

    title = Value()


class RssItem(Element):
    """An item of a channel."""

    title = Value()

    link = Value()

    description = Value()

    #: (:class:`str`) The full content of the item, e.g. from
    #: ``content:encoded``.
    content = Value()

    #: (:class:`str`) The email address of the author.
    author = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`RssCategory`.
    categories = ValueList()

    #: (:class:`str`) The URL of the page for comments.
    comments = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`RssEnclosure`.
    enclosures = ValueList()

    #: (:class:`RssGuid`) The unique identifier.
    guid = Value()

    #: (:class:`datetime.datetime`) When the item was published.
    publication_date = Value()

    #: (:class:`RssSource`) The channel the item came from.
    source = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()


class RssChannel(Element):
    """Metadata and items of a feed."""

    title = Value()

    #: (:class:`str`) The URL of the website corresponding to the channel.
    link = Value()

    description = Value()

    language = Value()

    copyright = Value()

    managing_editor = Value()

    web_master = Value()

    #: (:class:`datetime.datetime`) The publication date of the content.
    publication_date = Value()

    #: (:class:`datetime.datetime`) The last time the content changed.
    last_build_date = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`RssCategory`.
    categories = ValueList()

    generator = Value()

    #: (:class:`str`) The URL of the documentation of the format.
    docs = Value()

    #: (:class:`RssCloud`) The cloud to be notified of updates.
    cloud = Value()

    #: (:class:`int`) Time to live in minutes.
    ttl = Value()

    #: (:class:`RssImage`) The image of the channel.
    image = Value()

    #: (:class:`RssTextInput`) The text input of the channel.
    text_input = Value()

    #: (:class:`collections.MutableSequence`) The hours in GMT aggregators
    #: may skip.
    skip_hours = ValueList()

    #: (:class:`collections.MutableSequence`) The days of week aggregators
    #: may skip.
    skip_days = ValueList()

    #: (:class:`str`) The PICS rating.
    rating = Value()

    #: (:class:`collections.MutableSequence`) The list of :class:`RssItem`.
    items = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()


class RssFeed(SyndicationResource):
    """RSS feed document of any version."""

    resource_format = FormatKind.RSS
    resource_kind = 'feed'

    #: (:class:`~libsyndication.format.Version`) The version of the document.
    version = Value()

    #: (:class:`RssChannel`) The channel.
    channel = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
