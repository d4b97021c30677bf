""":mod:`libsyndication.parser.util` --- Utilities for document parsing
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

"""
import logging
import re

__all__ = ('XML_DECLARATION_BYTES_PATTERN', 'XML_DECLARATION_PATTERN',
           'XML_ENCODING_PATTERN', 'normalize_xml_encoding',
           'sniff_xml_encoding', 'strip_xml_declaration')


#: (:class:`re.RegexObject`) The pattern that matches to the ``encoding``
#: pseudo-attribute within the XML declaration of a bytestring.
XML_ENCODING_PATTERN = re.compile(
    br'\bencoding\s*=\s*'
    br'(?P<quote>["\'])(?P<encoding>[A-Za-z][\w.:-]*)(?P=quote)'
)

#: (:class:`re.RegexObject`) The pattern that matches to the XML declaration
#: of a (unicode) string.
XML_DECLARATION_PATTERN = re.compile(r'^\s*<\?xml\s[^>]*\?>')

#: (:class:`re.RegexObject`) The bytestring version of
#: :data:`XML_DECLARATION_PATTERN`.
XML_DECLARATION_BYTES_PATTERN = re.compile(br'^\s*<\?xml\s[^>]*\?>')


def sniff_xml_encoding(document):
    """Find the encoding that the XML declaration of the bytestring
    ``document`` names.

    :param document: the raw XML document
    :type document: :class:`bytes`
    :returns: a pair of the encoding name (or :const:`None` if the
              declaration names none) and the offset where the declaration
              ends.  :const:`None` if there's no declaration at all
    :rtype: :class:`tuple`

    """
    declaration = XML_DECLARATION_BYTES_PATTERN.match(document)
    if declaration is None:
        return None
    match = XML_ENCODING_PATTERN.search(declaration.group(0))
    if match is None or not match.group('encoding'):
        return None, declaration.end()
    return match.group('encoding').decode('ascii'), declaration.end()


def normalize_xml_encoding(document):
    """Re-encode the bytestring ``document`` to UTF-8 and drop its
    declaration, so that the XML parser doesn't have to know the legacy
    encoding it names.  Documents in encodings Python doesn't know are
    returned untouched.

    """
    if isinstance(document, str):
        return document
    elif not isinstance(document, bytes):
        raise TypeError('document must be a bytestring or a (unicode) string')
    declaration = sniff_xml_encoding(document)
    if declaration is None or declaration[0] is None:
        return document
    encoding, end = declaration
    try:
        text = document[end:].decode(encoding)
    except (LookupError, UnicodeError) as e:
        logger = logging.getLogger(__name__ + '.normalize_xml_encoding')
        logger.warning('cannot decode the document as %s: %s', encoding, e,
                       exc_info=True)
        return document
    return text.encode('utf-8')


def strip_xml_declaration(document):
    """Remove the XML declaration from the (unicode) string ``document``.
    Parsers refuse decoded strings that still declare an encoding.

    """
    if not isinstance(document, str):
        raise TypeError('document must be a (unicode) string, not ' +
                        repr(document))
    return XML_DECLARATION_PATTERN.sub('', document, count=1)
