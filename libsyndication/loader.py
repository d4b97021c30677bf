""":mod:`libsyndication.loader` --- Loading raw documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Shortcuts from raw XML bytes or strings to filled resources::

    from libsyndication.format import FormatKind
    from libsyndication.loader import load
    from libsyndication.opml import OpmlDocument

    with open('subscriptions.opml', 'rb') as f:
        document = load(f.read(), OpmlDocument(), FormatKind.OPML)

"""
from .adapter import NullArgumentError, fill
from .compat.etree import fromstring
from .parser.util import normalize_xml_encoding, strip_xml_declaration
from .settings import LoadSettings

__all__ = 'load', 'parse_document'


def parse_document(xml, settings=None):
    """Parse the raw ``xml`` document.  If the ``settings`` has
    :attr:`~libsyndication.settings.LoadSettings.character_encoding`,
    bytes are decoded with it regardless of what the document declares.

    :param xml: the raw xml document
    :type xml: :class:`bytes`, :class:`str`
    :param settings: the load settings.  default settings if omitted
    :type settings: :class:`~libsyndication.settings.LoadSettings`
    :returns: the root element

    """
    if xml is None:
        raise NullArgumentError('xml is required')
    elif settings is None:
        settings = LoadSettings()
    if isinstance(xml, bytes) and settings.character_encoding:
        xml = xml.decode(settings.character_encoding)
    if isinstance(xml, str):
        return fromstring(strip_xml_declaration(xml))
    return fromstring(normalize_xml_encoding(xml))


def load(xml, target, expected_format, settings=None):
    """Parse the raw ``xml`` document and fill the ``target`` with it.

    :param xml: the raw xml document
    :type xml: :class:`bytes`, :class:`str`
    :param target: the resource to fill
    :type target: :class:`~libsyndication.resource.SyndicationResource`
    :param expected_format: the format the document has to be in
    :type expected_format: :class:`~libsyndication.format.FormatKind`
    :param settings: the load settings.  default settings if omitted
    :type settings: :class:`~libsyndication.settings.LoadSettings`
    :returns: the ``target``
    :rtype: :class:`~libsyndication.resource.SyndicationResource`

    """
    if settings is None:
        settings = LoadSettings()
    fill(target, expected_format, parse_document(xml, settings), settings)
    return target
