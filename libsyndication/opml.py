""":mod:`libsyndication.opml` --- OPML documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for OPML 1.0, 1.1 and 2.0 outlines, e.g. subscription
lists exported from feed readers.

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = 'OpmlDocument', 'OpmlHead', 'OpmlOutline'


class OpmlHead(Element):
    """Metadata of an OPML document."""

    title = Value()

    #: (:class:`datetime.datetime`) When the document was created.
    created_on = Value()

    #: (:class:`datetime.datetime`) When the document was last modified.
    modified_on = Value()

    owner_name = Value()

    owner_email = Value()

    #: (:class:`str`) The URL of a page to contact the owner.
    owner_id = Value()

    #: (:class:`str`) The URL of the documentation of the format.
    docs = Value()

    #: (:class:`collections.MutableSequence`) Line numbers of the outlines
    #: that are expanded.
    expansion_state = ValueList()

    #: (:class:`int`) The line number of the outline displayed on the top
    #: line of the window.
    vertical_scroll_state = Value()

    window_top = Value()

    window_left = Value()

    window_bottom = Value()

    window_right = Value()


class OpmlOutline(Element):
    """An outline, which can recursively contain other outlines as well."""

    #: (:class:`str`) The text displayed when the outline is viewed.
    text = Value()

    #: (:class:`str`) How the other attributes are interpreted,
    #: e.g. ``'rss'``, ``'link'``, ``'include'``.
    type = Value()

    #: (:class:`bool`) Whether the outline is commented.
    is_comment = Value(default=False)

    #: (:class:`bool`) Whether a breakpoint is set on the outline.
    is_breakpoint = Value(default=False)

    #: (:class:`datetime.datetime`) When the outline was created.
    created_on = Value()

    #: (:class:`collections.MutableSequence`) Category strings.
    categories = ValueList()

    title = Value()

    #: (:class:`str`) The URL of the feed, for ``rss`` outlines.
    xml_url = Value()

    #: (:class:`str`) The URL of the web page of the feed, for ``rss``
    #: outlines.
    html_url = Value()

    #: (:class:`str`) The URL of ``link`` and ``include`` outlines.
    url = Value()

    description = Value()

    language = Value()

    #: (:class:`str`) The version of the feed's format, e.g. ``RSS2``.
    version = Value()

    #: (:class:`dict`) Attributes that OPML doesn't define.
    attributes = Value()

    #: (:class:`collections.MutableSequence`) Child :class:`OpmlOutline`
    #: elements.
    outlines = ValueList()


class OpmlDocument(SyndicationResource):
    """OPML document."""

    resource_format = FormatKind.OPML

    #: (:class:`~libsyndication.format.Version`) The version of the document.
    version = Value()

    #: (:class:`OpmlHead`) The metadata.
    head = Value()

    #: (:class:`collections.MutableSequence`) The top-level
    #: :class:`OpmlOutline` elements.
    outlines = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
