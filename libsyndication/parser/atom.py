""":mod:`libsyndication.parser.atom` --- Atom parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing Atom 1.0 (:rfc:`4287`) and Atom 0.3 documents.  Both versions are
parsed by the same functions parameterized by the namespace, since 0.3
elements are mostly renamed 1.0 elements:

==============  ================
Atom 0.3        Atom 1.0
==============  ================
``tagline``     ``subtitle``
``modified``    ``updated``
``issued``      ``published``
``copyright``   ``rights``
``url``         ``uri``
==============  ================

"""
import base64
import binascii
import functools

from ..codecs import DecodeError
from ..compat.etree import is_element, tostring
from ..feed import (AtomEntry, AtomFeed, Category, Content, Generator, Link,
                    Person, Text)
from ..format import ATOM03_XMLNS, ATOM_XMLNS, FormatKind, Version
from .base import ParserVariant, get_element_id
from .common import get_text, get_xml_base, parse_datetime, resolve_uri

__all__ = 'ATOM03', 'ATOM10', 'ATOM_XMLNS_SET', 'parse_entry', 'parse_feed'


#: (:class:`frozenset`) The set of XML namespaces for Atom format.
ATOM_XMLNS_SET = frozenset([ATOM_XMLNS, ATOM03_XMLNS])

TEXT_TYPES = {
    'text': 'text',
    'text/plain': 'text',
    'html': 'html',
    'text/html': 'html',
    'xhtml': 'xhtml',
    'application/xhtml+xml': 'xhtml',
}


def parse_feed(root, session, atom_xmlns):
    """Atom feed parser.  It parses the Atom XML and returns the feed data
    as internal representation.  If the ``root`` is a standalone entry,
    the feed contains only the entry.

    :param root: the root element of the document
    :param session: the parsing session
    :type session: :class:`~libsyndication.parser.base.Session`
    :param atom_xmlns: the namespace of the Atom version
    :type atom_xmlns: :class:`str`
    :returns: the parsed feed
    :rtype: :class:`~libsyndication.feed.AtomFeed`

    """
    xml_base = get_xml_base(root, session.xml_base)
    if root.tag == get_element_id(atom_xmlns, 'entry'):
        feed = AtomFeed()
        feed.entries.append(atom_get_entry_data(root, session, xml_base,
                                                atom_xmlns))
        return feed
    return atom_get_feed_data(root, session, xml_base, atom_xmlns)


def parse_entry(root, session, atom_xmlns):
    """Atom entry parser.  If the ``root`` is a feed, its first entry
    is parsed, or an empty entry is returned if it has no entries.

    :returns: the parsed entry
    :rtype: :class:`~libsyndication.feed.AtomEntry`

    """
    xml_base = get_xml_base(root, session.xml_base)
    entry_tag = get_element_id(atom_xmlns, 'entry')
    if root.tag != entry_tag:
        element = root.find(entry_tag)
        if element is None:
            return AtomEntry()
        root = element
    return atom_get_entry_data(root, session, xml_base, atom_xmlns)


def atom_get_feed_data(root, session, xml_base, atom_xmlns):
    feed_data = AtomFeed()
    ns = '{' + atom_xmlns + '}'
    for data in root:
        if not is_element(data):
            continue
        tag = data.tag
        if tag == ns + 'id':
            feed_data.id = atom_get_id_tag(data, xml_base)
        elif tag == ns + 'title':
            feed_data.title = atom_parse_text_construct(data)
        elif tag in (ns + 'subtitle', ns + 'tagline'):
            feed_data.subtitle = atom_parse_text_construct(data)
        elif tag == ns + 'updated':
            feed_data.updated_at = atom_parse_datetime(data)
        elif tag == ns + 'modified':
            # Non-standard in 1.0: some feeds use <modified> instead of
            # <updated>.
            if not feed_data.updated_at:
                feed_data.updated_at = atom_parse_datetime(data)
        elif tag in (ns + 'author', ns + 'contributor'):
            people = (feed_data.authors if tag == ns + 'author'
                      else feed_data.contributors)
            person = atom_parse_person_construct(data, xml_base, atom_xmlns)
            if person is not None and session.accepts(people):
                people.append(person)
        elif tag == ns + 'category':
            category = atom_get_category_tag(data)
            if category is not None and \
               session.accepts(feed_data.categories):
                feed_data.categories.append(category)
        elif tag == ns + 'link':
            if session.accepts(feed_data.links):
                feed_data.links.append(atom_get_link_tag(data, xml_base))
        elif tag == ns + 'generator':
            feed_data.generator = atom_get_generator_tag(data, xml_base)
        elif tag == ns + 'icon':
            feed_data.icon = atom_get_uri_tag(data, xml_base)
        elif tag == ns + 'logo':
            feed_data.logo = atom_get_uri_tag(data, xml_base)
        elif tag in (ns + 'rights', ns + 'copyright'):
            feed_data.rights = atom_parse_text_construct(data)
        elif tag == ns + 'entry':
            if session.accepts(feed_data.entries):
                feed_data.entries.append(
                    atom_get_entry_data(data, session, xml_base, atom_xmlns)
                )
        else:
            session.keep_extension(feed_data, data)
    return feed_data


def atom_get_entry_data(entry, session, xml_base, atom_xmlns):
    entry_data = AtomEntry()
    ns = '{' + atom_xmlns + '}'
    xml_base = get_xml_base(entry, xml_base)
    for data in entry:
        if not is_element(data):
            continue
        tag = data.tag
        if tag == ns + 'id':
            entry_data.id = atom_get_id_tag(data, xml_base)
        elif tag == ns + 'title':
            entry_data.title = atom_parse_text_construct(data)
        elif tag == ns + 'updated':
            entry_data.updated_at = atom_parse_datetime(data)
        elif tag == ns + 'modified':
            if not entry_data.updated_at:
                entry_data.updated_at = atom_parse_datetime(data)
        elif tag in (ns + 'published', ns + 'issued'):
            entry_data.published_at = atom_parse_datetime(data)
        elif tag in (ns + 'author', ns + 'contributor'):
            people = (entry_data.authors if tag == ns + 'author'
                      else entry_data.contributors)
            person = atom_parse_person_construct(data, xml_base, atom_xmlns)
            if person is not None and session.accepts(people):
                people.append(person)
        elif tag == ns + 'category':
            category = atom_get_category_tag(data)
            if category is not None and \
               session.accepts(entry_data.categories):
                entry_data.categories.append(category)
        elif tag == ns + 'link':
            if session.accepts(entry_data.links):
                entry_data.links.append(atom_get_link_tag(data, xml_base))
        elif tag == ns + 'content':
            entry_data.content = atom_get_content_tag(data, xml_base)
        elif tag == ns + 'summary':
            entry_data.summary = atom_parse_text_construct(data)
        elif tag in (ns + 'rights', ns + 'copyright'):
            entry_data.rights = atom_parse_text_construct(data)
        else:
            session.keep_extension(entry_data, data)
    return entry_data


def atom_parse_text_construct(data, cls=Text):
    text = cls()
    text_type = data.get('type')
    if text_type is not None:
        text.type = TEXT_TYPES.get(text_type.strip().lower(), text_type)
    mode = data.get('mode')
    if text.type == 'xhtml' or mode == 'xml':
        text.value = atom_get_inner_xml(data)
    elif mode == 'base64':
        try:
            text.value = base64.b64decode(data.text or '').decode('utf-8')
        except (binascii.Error, UnicodeError) as e:
            raise DecodeError('invalid base64 content: {0}'.format(e))
    else:
        text.value = data.text
    return text


def atom_get_inner_xml(data):
    children = [child for child in data if is_element(child)]
    if len(children) == 1 and children[0].tag.endswith('}div') and \
       not (data.text or '').strip():
        data = children[0]
    chunks = [data.text or '']
    for child in data:
        chunks.append(tostring(child, encoding='unicode'))
    return ''.join(chunks).strip()


def atom_parse_person_construct(data, xml_base, atom_xmlns):
    person = Person()
    ns = '{' + atom_xmlns + '}'
    xml_base = get_xml_base(data, xml_base)
    for child in data:
        if not is_element(child):
            continue
        if child.tag == ns + 'name':
            person.name = get_text(child)
        elif child.tag in (ns + 'uri', ns + 'url'):
            person.uri = resolve_uri(xml_base, get_text(child))
        elif child.tag == ns + 'email':
            person.email = get_text(child)
    if not person.name:
        if person.email:
            person.name = person.email
        elif person.uri:
            person.name = person.uri
        else:
            return None
    return person


def atom_get_id_tag(data, xml_base):
    xml_base = get_xml_base(data, xml_base)
    return resolve_uri(xml_base, get_text(data))


def atom_get_uri_tag(data, xml_base):
    xml_base = get_xml_base(data, xml_base)
    return resolve_uri(xml_base, get_text(data))


def atom_parse_datetime(data):
    return parse_datetime(data.text)


def atom_get_category_tag(data):
    if not data.get('term'):
        return
    return Category(
        term=data.get('term'),
        scheme_uri=data.get('scheme'),
        label=data.get('label')
    )


def atom_get_link_tag(data, xml_base):
    xml_base = get_xml_base(data, xml_base)
    link = Link(
        uri=resolve_uri(xml_base, data.get('href')),
        mimetype=data.get('type'),
        language=data.get('hreflang'),
        title=data.get('title')
    )
    length = data.get('length')
    if length and length.strip().isdigit():
        link.byte_size = int(length)
    rel = data.get('rel')
    if rel:
        link.relation = rel
    return link


def atom_get_generator_tag(data, xml_base):
    xml_base = get_xml_base(data, xml_base)
    generator = Generator(value=get_text(data), version=data.get('version'))
    uri = data.get('uri') or data.get('url')
    if uri:
        generator.uri = resolve_uri(xml_base, uri)
    return generator


def atom_get_content_tag(data, xml_base):
    content = atom_parse_text_construct(data, Content)
    if 'src' in data.attrib:
        xml_base = get_xml_base(data, xml_base)
        content.source_uri = resolve_uri(xml_base, data.attrib['src'])
    return content


#: (:class:`~libsyndication.parser.base.ParserVariant`) Atom 1.0.
ATOM10 = ParserVariant(
    FormatKind.ATOM, Version(1, 0),
    namespaces=[ATOM_XMLNS],
    feed=functools.partial(parse_feed, atom_xmlns=ATOM_XMLNS),
    entry=functools.partial(parse_entry, atom_xmlns=ATOM_XMLNS)
)

#: (:class:`~libsyndication.parser.base.ParserVariant`) Atom 0.3.
ATOM03 = ParserVariant(
    FormatKind.ATOM, Version(0, 3),
    namespaces=[ATOM03_XMLNS],
    feed=functools.partial(parse_feed, atom_xmlns=ATOM03_XMLNS),
    entry=functools.partial(parse_entry, atom_xmlns=ATOM03_XMLNS)
)
