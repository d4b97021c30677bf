""":mod:`libsyndication.fingerprint` --- Guessing formats of documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Every syndication format has its own root element, so the format and its
version can be told only by looking at the root element:

=============  =====================  ========  ===========================
Root           Namespace              Format    Version
=============  =====================  ========  ===========================
``APML``       APML 0.6 or none       APML      ``version`` attribute
``feed``       Atom 1.0               Atom      1.0
``entry``      Atom 1.0               Atom      1.0
``feed``       Atom 0.3               Atom      0.3
``entry``      Atom 0.3               Atom      0.3
``blog``       BlogML                 BlogML    ``version`` attribute or 2.0
``opml``       any                    OPML      ``version`` attribute
``rsd``        RSD 1.0 or none        RSD       ``version`` attribute
``rss``        none                   RSS       ``version`` attribute
``RDF``        RDF                    RSS       namespace of ``channel``
=============  =====================  ========  ===========================

When the namespace is given, it's matched before the local name, since
some formats share local names e.g. ``feed`` or ``entry``.

"""
from .compat.etree import get_root, is_element
from .format import (APML_XMLNS, ATOM03_XMLNS, ATOM_XMLNS, BLOGML_XMLNS,
                     RDF_XMLNS, RSD_XMLNS, RSS090_XMLNS, RSS10_XMLNS,
                     UNKNOWN_FINGERPRINT, Fingerprint, FormatKind, Version,
                     parse_version)
from .resource import split_tag

__all__ = 'NAMESPACE_VERSIONS', 'extract_fingerprint'


#: (:class:`dict`) The versions implied by namespaces.
NAMESPACE_VERSIONS = {
    APML_XMLNS: Version(0, 6),
    ATOM_XMLNS: Version(1, 0),
    ATOM03_XMLNS: Version(0, 3),
    BLOGML_XMLNS: Version(2, 0),
    RSD_XMLNS: Version(1, 0),
    RSS090_XMLNS: Version(0, 9),
    RSS10_XMLNS: Version(1, 0),
}


def extract_fingerprint(document):
    """Guess the format and the version of the given ``document``.
    It doesn't change the ``document`` at all.

    >>> from libsyndication.compat.etree import fromstring
    >>> fingerprint = extract_fingerprint(fromstring('<rss version="2.0" />'))
    >>> fingerprint.format, str(fingerprint.version)
    (<FormatKind.RSS: 'rss'>, '2.0')

    :param document: a parsed XML document, either an element tree or
                     its root element
    :returns: the fingerprint.
              :const:`~libsyndication.format.UNKNOWN_FINGERPRINT` if
              the format is unknown.  its version is :const:`None` if
              the format is known but its version indicator is missing or
              malformed
    :rtype: :class:`~libsyndication.format.Fingerprint`

    """
    root = get_root(document)
    if not is_element(root):
        return UNKNOWN_FINGERPRINT
    namespace, name = split_tag(root.tag)
    if namespace in (ATOM_XMLNS, ATOM03_XMLNS):
        if name in ('feed', 'entry'):
            return Fingerprint(FormatKind.ATOM, NAMESPACE_VERSIONS[namespace])
    elif namespace == BLOGML_XMLNS:
        if name == 'blog':
            return Fingerprint(FormatKind.BLOGML,
                               versioned(root, namespace))
    elif namespace == RDF_XMLNS:
        if name == 'RDF':
            return Fingerprint(FormatKind.RSS, rdf_version(root))
    elif namespace in (None, APML_XMLNS) and name == 'APML':
        return Fingerprint(FormatKind.APML, versioned(root, namespace))
    elif namespace in (None, RSD_XMLNS) and name == 'rsd':
        return Fingerprint(FormatKind.RSD, versioned(root))
    elif namespace is None and name == 'rss':
        return Fingerprint(FormatKind.RSS, versioned(root))
    if name == 'opml':
        return Fingerprint(FormatKind.OPML, versioned(root))
    return UNKNOWN_FINGERPRINT


def versioned(root, namespace=None):
    """Read the ``version`` attribute of the ``root``.  If it's absent,
    the version implied by the ``namespace`` is used instead.

    """
    version = root.get('version')
    if version is None:
        return NAMESPACE_VERSIONS.get(namespace)
    return parse_version(version)


def rdf_version(root):
    """RSS 0.9 and 1.0 documents have the same ``rdf:RDF`` root, so their
    version is told by the namespace of the ``channel`` element.

    """
    for child in root:
        if not is_element(child):
            continue
        namespace, name = split_tag(child.tag)
        if name == 'channel' and namespace in (RSS090_XMLNS, RSS10_XMLNS):
            return NAMESPACE_VERSIONS[namespace]
    return None
