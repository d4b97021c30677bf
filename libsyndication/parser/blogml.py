""":mod:`libsyndication.parser.blogml` --- BlogML parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing BlogML 2.0, the format that blog engines export the whole blog
into.  Every element lives in :const:`~libsyndication.format.BLOGML_XMLNS`.

"""
import base64
import binascii
import functools

from ..blogml import (BlogMLAttachment, BlogMLAuthor, BlogMLCategory,
                      BlogMLComment, BlogMLDocument, BlogMLPost,
                      BlogMLTrackback)
from ..codecs import Boolean, DecodeError, Integer
from ..compat.etree import is_element
from ..format import BLOGML_XMLNS, FormatKind, Version
from .base import ParserBase, ParserVariant, collect, get_element_id
from .common import get_text, parse_datetime

__all__ = 'BLOGML20', 'blogml_parser', 'parse_blogml'


_integer = Integer()
_boolean = Boolean()
_embedded = Boolean(default_value=False)

NS = [BLOGML_XMLNS]


def node_attributes(element):
    """Read the attributes common to most BlogML elements."""
    return dict(
        id=element.get('id'),
        created_on=parse_datetime(element.get('date-created')),
        modified_on=parse_datetime(element.get('date-modified')),
        approved=_boolean.decode(element.get('approved'))
    )


def decode_integer(text):
    if text is None or not text.strip():
        return None
    return _integer.decode(text)


def text_parser(element, session):
    return get_text(element), session


def content_parser(element, session):
    """Read the text of content elements, which are base64-encoded when
    their ``type`` is ``base64``.

    """
    text = get_text(element)
    if text is not None and element.get('type') == 'base64':
        try:
            text = base64.b64decode(text).decode('utf-8')
        except (binascii.Error, UnicodeError) as e:
            raise DecodeError('invalid base64 content: {0}'.format(e))
    return text, session


def ref_parser(element, session):
    return element.get('ref') or None, session


def property_parser(element, session):
    properties = {}
    for child in element:
        if is_element(child) and \
           child.tag == get_element_id(BLOGML_XMLNS, 'property') and \
           child.get('name'):
            properties[child.get('name')] = child.get('value')
    return properties, session


def document_parser(element, session):
    return BlogMLDocument(
        root_url=element.get('root-url'),
        generated_on=parse_datetime(element.get('date-created'))
    ), session


def author_parser(element, session):
    return BlogMLAuthor(email=element.get('email'),
                        **node_attributes(element)), session


def category_parser(element, session):
    return BlogMLCategory(description=element.get('description'),
                          parent_ref=element.get('parentref'),
                          **node_attributes(element)), session


def comment_parser(element, session):
    return BlogMLComment(user_name=element.get('user-name'),
                         user_email=element.get('user-email'),
                         user_url=element.get('user-url'),
                         **node_attributes(element)), session


def trackback_parser(element, session):
    return BlogMLTrackback(url=element.get('url'),
                           **node_attributes(element)), session


def attachment_parser(element, session):
    return BlogMLAttachment(
        url=element.get('url'),
        mimetype=element.get('mime-type'),
        external_uri=element.get('external-uri'),
        embedded=_embedded.decode(element.get('embedded')),
        size=decode_integer(element.get('size')),
        data=get_text(element)
    ), session


def post_parser(element, session):
    return BlogMLPost(
        url=element.get('post-url'),
        type=element.get('type'),
        views=decode_integer(element.get('views')),
        **node_attributes(element)
    ), session


def titled(parser, *children):
    """Make a :class:`~libsyndication.parser.base.ParserBase` of
    the ``parser`` that reads the ``title`` child and the given
    ``children``, pairs of an element name and a parser.

    """
    result = ParserBase(parser)
    result.register('title', ParserBase(text_parser), namespace_set=NS)
    for name, child in children:
        result.register(name, child, namespace_set=NS)
    return result


def build_blogml_parser():
    """Build the parser tree for the ``blog`` root.

    :returns: the root parser
    :rtype: :class:`~libsyndication.parser.base.ParserBase`

    """
    def container(parser, element_name):
        return ParserBase(collect(parser, element_name, NS))

    content = ParserBase(content_parser)
    comment = titled(comment_parser, ('content', content))
    trackback = titled(trackback_parser)
    post = titled(post_parser, ('content', content))
    post.register('post-name', ParserBase(text_parser), 'name', NS)
    post.register('excerpt', content, namespace_set=NS)
    post.register('categories', container(ParserBase(ref_parser), 'category'),
                  'category_refs', NS)
    post.register('authors', container(ParserBase(ref_parser), 'author'),
                  'author_refs', NS)
    post.register('comments', container(comment, 'comment'), 'comments', NS)
    post.register('trackbacks', container(trackback, 'trackback'),
                  'trackbacks', NS)
    post.register('attachments',
                  container(ParserBase(attachment_parser), 'attachment'),
                  'attachments', NS)
    root = titled(document_parser)
    root.register('sub-title', ParserBase(text_parser), 'subtitle', NS)
    root.register('authors', container(titled(author_parser), 'author'),
                  'authors', NS)
    root.register('extended-properties', ParserBase(property_parser),
                  'extended_properties', NS)
    root.register('categories', container(titled(category_parser),
                                          'category'),
                  'categories', NS)
    root.register('posts', container(post, 'post'), 'posts', NS)
    return root


#: (:class:`~libsyndication.parser.base.ParserBase`) The parser tree of
#: BlogML 2.0.
blogml_parser = build_blogml_parser()


def parse_blogml(root, session, version):
    """Parse the ``blog`` root.

    :returns: the parsed document
    :rtype: :class:`~libsyndication.blogml.BlogMLDocument`

    """
    document = blogml_parser(root, session)
    document.version = version
    return document


#: (:class:`~libsyndication.parser.base.ParserVariant`) BlogML 2.0.
BLOGML20 = ParserVariant(
    FormatKind.BLOGML, Version(2, 0),
    namespaces=[BLOGML_XMLNS],
    document=functools.partial(parse_blogml, version=Version(2, 0))
)
