""":mod:`libsyndication.parser.opml` --- OPML parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing OPML 1.0, 1.1 and 2.0.  Later versions only loosen what earlier
ones allowed, so every version is parsed by the same parser tree.
Outlines are parsed recursively by the outline parser registered as
a child of itself.

"""
import functools
import logging

from ..codecs import Boolean, CommaSeparatedList, DecodeError, Integer
from ..format import FormatKind, Version
from ..opml import OpmlDocument, OpmlHead, OpmlOutline
from .base import ParserBase, ParserVariant, collect
from .common import get_text, parse_datetime

__all__ = ('OPML10', 'OPML11', 'OPML20', 'build_opml_parser', 'opml_parser',
           'parse_opml')


_integer = Integer()
_boolean = Boolean(default_value=False)
_categories = CommaSeparatedList()
_expansion_state = CommaSeparatedList(Integer())

#: The attributes of ``outline`` elements that OPML defines, mapped to
#: the attribute names of :class:`~libsyndication.opml.OpmlOutline`.
OUTLINE_ATTRIBUTES = {
    'text': 'text',
    'type': 'type',
    'title': 'title',
    'xmlUrl': 'xml_url',
    'htmlUrl': 'html_url',
    'url': 'url',
    'description': 'description',
    'language': 'language',
    'version': 'version',
}


def text_parser(element, session):
    return get_text(element), session


def datetime_parser(element, session):
    return parse_datetime(element.text), session


def integer_parser(element, session):
    text = get_text(element)
    if text is None:
        return None, session
    return _integer.decode(text), session


def expansion_state_parser(element, session):
    return _expansion_state.decode(element.text), session


def document_parser(element, session):
    return OpmlDocument(), session


def head_parser(element, session):
    return OpmlHead(), session


def outline_parser(element, session):
    outline = OpmlOutline()
    extra = {}
    for name, value in element.attrib.items():
        if name in OUTLINE_ATTRIBUTES:
            setattr(outline, OUTLINE_ATTRIBUTES[name], value)
        elif name in ('isComment', 'isBreakpoint'):
            attr_name = 'is_comment' if name == 'isComment' \
                else 'is_breakpoint'
            try:
                setattr(outline, attr_name, _boolean.decode(value))
            except DecodeError:
                logger = logging.getLogger(__name__ + '.outline_parser')
                logger.debug('invalid %s value: %r', name, value)
        elif name == 'created':
            outline.created_on = parse_datetime(value)
        elif name == 'category':
            outline.categories = _categories.decode(value)
        else:
            extra[name] = value
    outline.attributes = extra
    return outline, session


#: The elements of the head: name, parser, and attribute name.
HEAD_ELEMENTS = [
    ('title', text_parser, 'title'),
    ('dateCreated', datetime_parser, 'created_on'),
    ('dateModified', datetime_parser, 'modified_on'),
    ('ownerName', text_parser, 'owner_name'),
    ('ownerEmail', text_parser, 'owner_email'),
    ('ownerId', text_parser, 'owner_id'),
    ('docs', text_parser, 'docs'),
    ('expansionState', expansion_state_parser, 'expansion_state'),
    ('vertScrollState', integer_parser, 'vertical_scroll_state'),
    ('windowTop', integer_parser, 'window_top'),
    ('windowLeft', integer_parser, 'window_left'),
    ('windowBottom', integer_parser, 'window_bottom'),
    ('windowRight', integer_parser, 'window_right'),
]


def build_opml_parser():
    """Build the parser tree for the ``opml`` root.

    :returns: the root parser
    :rtype: :class:`~libsyndication.parser.base.ParserBase`

    """
    root = ParserBase(document_parser)
    head = root.register('head', ParserBase(head_parser))
    for name, parser, attr_name in HEAD_ELEMENTS:
        head.register(name, ParserBase(parser), attr_name)
    outline = ParserBase(outline_parser)
    outline.register('outline', outline, 'outlines')
    root.register('body', ParserBase(collect(outline, 'outline')),
                  'outlines')
    return root


#: (:class:`~libsyndication.parser.base.ParserBase`) The parser tree
#: every OPML version shares.
opml_parser = build_opml_parser()


def parse_opml(root, session, version):
    """Parse the ``opml`` root.

    :returns: the parsed document
    :rtype: :class:`~libsyndication.opml.OpmlDocument`

    """
    document = opml_parser(root, session)
    document.version = version
    return document


def make_opml_variant(version):
    return ParserVariant(
        FormatKind.OPML, version,
        document=functools.partial(parse_opml, version=version)
    )


#: (:class:`~libsyndication.parser.base.ParserVariant`) OPML 1.0.
OPML10 = make_opml_variant(Version(1, 0))

#: (:class:`~libsyndication.parser.base.ParserVariant`) OPML 1.1.
OPML11 = make_opml_variant(Version(1, 1))

#: (:class:`~libsyndication.parser.base.ParserVariant`) OPML 2.0.
OPML20 = make_opml_variant(Version(2, 0))
