""":mod:`libsyndication.apml` --- APML documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for Attention Profiling Markup Language (APML) 0.6,
which describes what a person pays attention to.

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = ('ApmlApplication', 'ApmlAuthor', 'ApmlConcept', 'ApmlData',
           'ApmlDocument', 'ApmlHead', 'ApmlProfile', 'ApmlSource')


class ApmlHead(Element):
    """Metadata of an APML document."""

    title = Value()

    generator = Value()

    user_email = Value()

    #: (:class:`datetime.datetime`) When the document was created.
    created_on = Value()


class ApmlConcept(Element):
    """A concept (keyword) the user pays attention to."""

    key = Value()

    #: (:class:`float`) The attention value between -1.0 and 1.0.
    value = Value()

    #: (:class:`str`) Where the attention data came from.
    origin = Value()

    #: (:class:`datetime.datetime`) When the attention data was updated.
    updated_on = Value()


class ApmlAuthor(ApmlConcept):
    """An author of a source the user pays attention to."""


class ApmlSource(Element):
    """A source (e.g. a feed) the user pays attention to."""

    #: (:class:`str`) The URL of the source.
    key = Value()

    name = Value()

    #: (:class:`float`) The attention value between -1.0 and 1.0.
    value = Value()

    #: (:class:`str`) The MIME type of the source.
    type = Value()

    origin = Value()

    updated_on = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`ApmlAuthor`.
    authors = ValueList()


class ApmlData(Element):
    """Implicit or explicit attention data."""

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`ApmlConcept`.
    concepts = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`ApmlSource`.
    sources = ValueList()


class ApmlProfile(Element):
    """A named attention profile e.g. ``Work``, ``Home``."""

    name = Value()

    #: (:class:`ApmlData`) The data gathered by tools.
    implicit_data = Value()

    #: (:class:`ApmlData`) The data the user stated.
    explicit_data = Value()


class ApmlApplication(Element):
    """Application-specific data."""

    name = Value()

    #: (:class:`collections.MutableSequence`) The payload as
    #: :class:`~libsyndication.resource.Extension` elements.
    data = ValueList()


class ApmlDocument(SyndicationResource):
    """APML document."""

    resource_format = FormatKind.APML

    #: (:class:`~libsyndication.format.Version`) The version of the document.
    version = Value()

    #: (:class:`ApmlHead`) The metadata.
    head = Value()

    #: (:class:`str`) The name of the default profile.
    default_profile = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`ApmlProfile`.
    profiles = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`ApmlApplication`.
    applications = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
