""":mod:`libsyndication.parser.rss` --- RSS parsers
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing every RSS version.  There are two lineages that share only
their name:

- RSS 0.9 and 1.0 are RDF documents, in which the ``channel``, ``image``,
  ``textinput`` and ``item`` elements are siblings under ``rdf:RDF``.
- RSS 0.91, 0.92 and 2.0 have the ``rss`` root that contains
  the ``channel``, which contains everything else.  Each version adds
  elements to the previous one, so the parser trees for them are built
  from the same tables, picking the elements the version defines.

"""
import functools
import logging

from ..codecs import Boolean, DecodeError, Integer
from ..compat.etree import is_element
from ..format import (CONTENT_XMLNS, DC_XMLNS, RDF_XMLNS, RSS090_XMLNS,
                      RSS10_XMLNS, FormatKind, Version)
from ..rss import (RssCategory, RssChannel, RssCloud, RssEnclosure, RssFeed,
                   RssGuid, RssImage, RssItem, RssSource, RssTextInput)
from ..tz import guess_tzinfo_by_language_tag, utc
from .base import ParserBase, ParserVariant, get_element_id
from .common import get_text, parse_datetime

__all__ = ('RSS090', 'RSS091', 'RSS092', 'RSS10', 'RSS20',
           'build_rdf_parsers', 'build_rss_parser', 'guess_default_tzinfo')


_integer = Integer()
_permalink = Boolean(default_value=True)

V091 = Version(0, 91)
V092 = Version(0, 92)
V20 = Version(2, 0)

ALL = frozenset([V091, V092, V20])
SINCE_092 = frozenset([V092, V20])
ONLY_20 = frozenset([V20])


def text_parser(element, session):
    return get_text(element), session


def integer_parser(element, session):
    text = get_text(element)
    if text is None:
        return None, session
    return _integer.decode(text), session


def datetime_parser(element, session):
    return parse_datetime(element.text, session.default_tzinfo), session


def category_parser(element, session):
    value = get_text(element)
    if value is None:
        return None, session
    return RssCategory(value=value, domain=element.get('domain')), session


def cloud_parser(element, session):
    port = element.get('port')
    return RssCloud(
        domain=element.get('domain'),
        port=_integer.decode(port) if port else None,
        path=element.get('path'),
        register_procedure=element.get('registerProcedure'),
        protocol=element.get('protocol')
    ), session


def enclosure_parser(element, session):
    length = element.get('length')
    try:
        length = _integer.decode(length) if length else None
    except DecodeError:
        logger = logging.getLogger(__name__ + '.enclosure_parser')
        logger.debug('invalid enclosure length: %r', length)
        length = None
    return RssEnclosure(
        url=element.get('url'),
        length=length,
        mimetype=element.get('type')
    ), session


def guid_parser(element, session):
    value = get_text(element)
    if value is None:
        return None, session
    return RssGuid(
        value=value,
        is_permalink=_permalink.decode(element.get('isPermaLink'))
    ), session


def source_parser(element, session):
    return RssSource(url=element.get('url'), title=get_text(element)), session


def skip_hours_parser(element, session):
    hours = []
    for hour in element.findall('hour'):
        text = get_text(hour)
        if text is not None:
            hours.append(_integer.decode(text))
    return hours, session


def skip_days_parser(element, session):
    days = [get_text(day) for day in element.findall('day')]
    return [day for day in days if day], session


def image_parser(element, session):
    return RssImage(), session


def text_input_parser(element, session):
    return RssTextInput(), session


def channel_parser(element, session):
    return RssChannel(), session


def item_parser(element, session):
    return RssItem(), session


def feed_parser(element, session):
    return RssFeed(), session


def guess_default_tzinfo(language):
    """Guess what time zone is implied in the feed by seeing its
    ``<language>`` tag.

    :param language: the language element of the channel, or :const:`None`
    :returns: the guessed time zone, or UTC
    :rtype: :class:`datetime.tzinfo`

    """
    return guess_tzinfo_by_language_tag(get_text(language)) or utc


IMAGE_ELEMENTS = [
    ('url', text_parser, 'url'),
    ('title', text_parser, 'title'),
    ('link', text_parser, 'link'),
    ('width', integer_parser, 'width'),
    ('height', integer_parser, 'height'),
    ('description', text_parser, 'description'),
]

TEXT_INPUT_ELEMENTS = [
    ('title', text_parser, 'title'),
    ('description', text_parser, 'description'),
    ('name', text_parser, 'name'),
    ('link', text_parser, 'link'),
]

#: The elements of the channel: name, parser, attribute name, and
#: the versions that define it.
CHANNEL_ELEMENTS = [
    ('title', text_parser, 'title', ALL),
    ('link', text_parser, 'link', ALL),
    ('description', text_parser, 'description', ALL),
    ('language', text_parser, 'language', ALL),
    ('copyright', text_parser, 'copyright', ALL),
    ('managingEditor', text_parser, 'managing_editor', ALL),
    ('webMaster', text_parser, 'web_master', ALL),
    ('pubDate', datetime_parser, 'publication_date', ALL),
    ('lastBuildDate', datetime_parser, 'last_build_date', ALL),
    ('docs', text_parser, 'docs', ALL),
    ('skipHours', skip_hours_parser, 'skip_hours', ALL),
    ('skipDays', skip_days_parser, 'skip_days', ALL),
    ('rating', text_parser, 'rating', ALL),
    ('category', category_parser, 'categories', SINCE_092),
    ('cloud', cloud_parser, 'cloud', SINCE_092),
    ('generator', text_parser, 'generator', ONLY_20),
    ('ttl', integer_parser, 'ttl', ONLY_20),
]

#: The elements of items: name, parser, attribute name, and the versions
#: that define it.
ITEM_ELEMENTS = [
    ('title', text_parser, 'title', ALL),
    ('link', text_parser, 'link', ALL),
    ('description', text_parser, 'description', ALL),
    ('source', source_parser, 'source', SINCE_092),
    ('enclosure', enclosure_parser, 'enclosures', SINCE_092),
    ('category', category_parser, 'categories', SINCE_092),
    ('author', text_parser, 'author', ONLY_20),
    ('comments', text_parser, 'comments', ONLY_20),
    ('guid', guid_parser, 'guid', ONLY_20),
    ('pubDate', datetime_parser, 'publication_date', ONLY_20),
]


def build_rss_parser(version):
    """Build the parser tree for the ``rss`` root of the given
    ``version``, one of 0.91, 0.92 and 2.0.

    :param version: the version of RSS
    :type version: :class:`~libsyndication.format.Version`
    :returns: the root parser
    :rtype: :class:`~libsyndication.parser.base.ParserBase`

    """
    if version not in ALL:
        raise ValueError('not an rss-rooted version: {0}'.format(version))
    root = ParserBase(feed_parser)
    channel = root.register('channel', ParserBase(channel_parser))
    for name, parser, attr_name, versions in CHANNEL_ELEMENTS:
        if version in versions:
            channel.register(name, ParserBase(parser), attr_name)
    image = channel.register('image', ParserBase(image_parser))
    for name, parser, attr_name in IMAGE_ELEMENTS:
        image.register(name, ParserBase(parser), attr_name)
    text_input = channel.register('textInput', ParserBase(text_input_parser),
                                  'text_input')
    for name, parser, attr_name in TEXT_INPUT_ELEMENTS:
        text_input.register(name, ParserBase(parser), attr_name)
    item = channel.register('item', ParserBase(item_parser), 'items')
    for name, parser, attr_name, versions in ITEM_ELEMENTS:
        if version in versions:
            item.register(name, ParserBase(parser), attr_name)
    if version == V20:
        item.register('encoded', ParserBase(text_parser), 'content',
                      [CONTENT_XMLNS])
    return root


def parse_rss(root, session, parser, version):
    """Parse the ``rss`` rooted document.

    :returns: the parsed feed
    :rtype: :class:`~libsyndication.rss.RssFeed`

    """
    language = root.find('channel/language')
    session.default_tzinfo = guess_default_tzinfo(language)
    feed = parser(root, session)
    feed.version = version
    return feed


def build_rdf_parsers(rss_xmlns):
    """Build the parsers of the ``channel``, ``image``, ``textinput`` and
    ``item`` elements of the RDF-based RSS in the ``rss_xmlns``.  Dublin
    Core and ``content:encoded`` elements are parsed only for RSS 1.0.

    :returns: the dictionary of element names to parsers
    :rtype: :class:`dict`

    """
    ns = [rss_xmlns]
    channel = ParserBase(channel_parser)
    item = ParserBase(item_parser)
    image = ParserBase(image_parser)
    text_input = ParserBase(text_input_parser)
    for parent in channel, item:
        parent.register('title', ParserBase(text_parser), namespace_set=ns)
        parent.register('link', ParserBase(text_parser), namespace_set=ns)
    channel.register('description', ParserBase(text_parser),
                     namespace_set=ns)
    for name in 'title', 'url', 'link':
        image.register(name, ParserBase(text_parser), namespace_set=ns)
    for name, parser, attr_name in TEXT_INPUT_ELEMENTS:
        text_input.register(name, ParserBase(parser), attr_name, ns)
    if rss_xmlns == RSS10_XMLNS:
        dc = [DC_XMLNS]
        item.register('description', ParserBase(text_parser),
                      namespace_set=ns)
        item.register('encoded', ParserBase(text_parser), 'content',
                      [CONTENT_XMLNS])
        item.register('creator', ParserBase(text_parser), 'author', dc)
        for parent in channel, item:
            parent.register('date', ParserBase(datetime_parser),
                            'publication_date', dc)
            parent.register('subject', ParserBase(category_parser),
                            'categories', dc)
        channel.register('language', ParserBase(text_parser),
                         namespace_set=dc)
        channel.register('rights', ParserBase(text_parser), 'copyright', dc)
        channel.register('publisher', ParserBase(text_parser),
                         'managing_editor', dc)
    return {
        'channel': channel,
        'item': item,
        'image': image,
        'textinput': text_input,
    }


def parse_rdf(root, session, rss_xmlns, parsers, version):
    """Parse the RDF-based RSS document.  Unlike the ``rss`` rooted ones,
    its image, text input and items are siblings of the channel.

    :returns: the parsed feed
    :rtype: :class:`~libsyndication.rss.RssFeed`

    """
    feed = RssFeed(version=version)
    channel_element = root.find(get_element_id(rss_xmlns, 'channel'))
    if channel_element is None:
        channel = RssChannel()
    else:
        channel = parsers['channel'](channel_element, session)
    feed.channel = channel
    for element in root:
        if not is_element(element) or element is channel_element:
            continue
        if element.tag == get_element_id(rss_xmlns, 'item'):
            if session.accepts(channel.items):
                channel.items.append(parsers['item'](element, session))
        elif element.tag == get_element_id(rss_xmlns, 'image'):
            channel.image = parsers['image'](element, session)
        elif element.tag == get_element_id(rss_xmlns, 'textinput'):
            channel.text_input = parsers['textinput'](element, session)
        else:
            session.keep_extension(feed, element)
    return feed


def make_rss_variant(version):
    return ParserVariant(
        FormatKind.RSS, version,
        feed=functools.partial(parse_rss, parser=build_rss_parser(version),
                               version=version)
    )


def make_rdf_variant(version, rss_xmlns):
    return ParserVariant(
        FormatKind.RSS, version,
        namespaces=[rss_xmlns, RDF_XMLNS],
        feed=functools.partial(parse_rdf, rss_xmlns=rss_xmlns,
                               parsers=build_rdf_parsers(rss_xmlns),
                               version=version)
    )


#: (:class:`~libsyndication.parser.base.ParserVariant`) RSS 0.9.
RSS090 = make_rdf_variant(Version(0, 9), RSS090_XMLNS)

#: (:class:`~libsyndication.parser.base.ParserVariant`) RSS 0.91.
RSS091 = make_rss_variant(V091)

#: (:class:`~libsyndication.parser.base.ParserVariant`) RSS 0.92.
RSS092 = make_rss_variant(V092)

#: (:class:`~libsyndication.parser.base.ParserVariant`) RSS 1.0.
RSS10 = make_rdf_variant(Version(1, 0), RSS10_XMLNS)

#: (:class:`~libsyndication.parser.base.ParserVariant`) RSS 2.0.
RSS20 = make_rss_variant(V20)
