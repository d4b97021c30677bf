""":mod:`libsyndication.rsd` --- RSD documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for Really Simple Discovery (RSD) 0.6 and 1.0, which
tells clients what blogging APIs a site offers.

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = 'RsdApi', 'RsdDocument', 'RsdService', 'RsdSetting'


class RsdSetting(Element):
    """A named setting of an API."""

    name = Value()

    value = Value()


class RsdApi(Element):
    """An API the service offers."""

    #: (:class:`str`) The name of the API e.g. ``'MetaWeblog'``.
    name = Value()

    #: (:class:`bool`) Whether the API is preferred over the others.
    is_preferred = Value(default=False)

    #: (:class:`str`) The endpoint URL.
    api_link = Value()

    blog_id = Value()

    #: (:class:`str`) The URL of the documentation of the API.
    docs = Value()

    notes = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`RsdSetting`.
    settings = ValueList()


class RsdService(Element):
    """The service of the site."""

    #: (:class:`str`) The name of the blogging engine.
    engine_name = Value()

    #: (:class:`str`) The URL of the blogging engine.
    engine_link = Value()

    #: (:class:`str`) The URL of the homepage of the blog.
    homepage_link = Value()

    #: (:class:`collections.MutableSequence`) The list of :class:`RsdApi`.
    apis = ValueList()


class RsdDocument(SyndicationResource):
    """RSD document."""

    resource_format = FormatKind.RSD

    #: (:class:`~libsyndication.format.Version`) The version of the document.
    version = Value()

    #: (:class:`RsdService`) The service.
    service = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
