import copy
import logging

import mock
from pytest import fixture, mark, raises

from libsyndication.adapter import (FillError, FormatMismatchError,
                                    InvalidExpectedFormatError,
                                    InvalidTargetError, NullArgumentError,
                                    ResourceAdapter, UnsupportedVersionError,
                                    fill)
from libsyndication.codecs import DecodeError
from libsyndication.compat.etree import fromstring
from libsyndication.feed import AtomEntry, AtomFeed, Text
from libsyndication.format import FormatKind, Version
from libsyndication.parser.atom import ATOM10
from libsyndication.parser.base import ParserVariant
from libsyndication.parser.rss import RSS20
from libsyndication.registry import AdapterRegistry
from libsyndication.resource import SyndicationResource
from libsyndication.rss import RssChannel, RssFeed
from libsyndication.schema import Value
from .samples import DOCUMENT_PER_FORMAT, MINIMAL_DOCUMENTS


atom_feed = '''
<feed xmlns="http://www.w3.org/2005/Atom">
    <id>urn:uuid:60a76c80-d399-11d9-b93c-0003939e0af6</id>
    <title>Example Feed</title>
    <updated>2003-12-13T18:30:02Z</updated>
    <entry>
        <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
        <title>Atom-Powered Robots Run Amok</title>
        <updated>2003-12-13T18:30:02Z</updated>
    </entry>
</feed>
'''

rss2_feed = '''
<rss version="2.0">
    <channel>
        <title>Liftoff News</title>
        <link>http://liftoff.msfc.nasa.gov/</link>
        <description>Liftoff to Space Exploration.</description>
        <item>
            <title>Star City</title>
            <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
        </item>
    </channel>
</rss>
'''


class AtomSomething(SyndicationResource):

    resource_format = FormatKind.ATOM
    resource_kind = 'something'

    title = Value()


class CustomRssFeed(RssFeed):

    pass


class CustomAtomEntry(AtomEntry):

    pass


@fixture
def fx_rss_feed():
    return RssFeed(channel=RssChannel(title='Untouched'))


@mark.parametrize(('format', 'version', 'resource_type', 'xml'),
                  MINIMAL_DOCUMENTS)
def test_fill_every_supported_version(format, version, resource_type, xml,
                                      fx_settings):
    target = resource_type()
    assert fill(target, format, fromstring(xml), fx_settings)
    assert target != resource_type()
    if format is not FormatKind.ATOM:
        assert target.version == version


@mark.parametrize(('format', 'version', 'resource_type', 'xml'),
                  MINIMAL_DOCUMENTS)
def test_fill_invokes_matching_variant(format, version, resource_type, xml,
                                       fx_settings):
    spy = mock.Mock(return_value=resource_type())
    variant = ParserVariant(format, version,
                            **{resource_type.resource_kind: spy})
    adapter = ResourceAdapter(fromstring(xml), fx_settings,
                              registry=AdapterRegistry([variant]))
    assert adapter.fill(resource_type(), format)
    assert spy.call_count == 1
    root, session = spy.call_args[0]
    assert session.settings is fx_settings


def format_pairs():
    for expected in DOCUMENT_PER_FORMAT:
        for detected in DOCUMENT_PER_FORMAT:
            if expected is not detected:
                yield expected, detected


@mark.parametrize(('expected', 'detected'), list(format_pairs()))
def test_fill_format_mismatch(expected, detected, fx_settings):
    resource_type, _ = DOCUMENT_PER_FORMAT[expected]
    _, xml = DOCUMENT_PER_FORMAT[detected]
    target = resource_type()
    with raises(FormatMismatchError) as exc_info:
        fill(target, expected, fromstring(xml), fx_settings)
    assert exc_info.value.expected is expected
    assert exc_info.value.detected is detected
    assert target == resource_type()


def test_fill_unknown_document(fx_rss_feed, fx_settings):
    before = copy.deepcopy(fx_rss_feed)
    with raises(FormatMismatchError) as exc_info:
        fill(fx_rss_feed, FormatKind.RSS, fromstring('<html />'), fx_settings)
    assert exc_info.value.detected is FormatKind.UNKNOWN
    assert fx_rss_feed == before


@mark.parametrize('xml', [
    '<rss version="0.5"><channel><title>Old</title></channel></rss>',
    '<rss version="2.0.1"><channel><title>Odd</title></channel></rss>',
    '<rss><channel><title>No version</title></channel></rss>',
])
def test_fill_unsupported_version_is_noop(xml, fx_rss_feed, fx_settings,
                                          caplog):
    before = copy.deepcopy(fx_rss_feed)
    spy = mock.Mock(return_value=RssFeed())
    registry = AdapterRegistry([
        ParserVariant(FormatKind.RSS, Version(2, 0), feed=spy),
        ParserVariant(FormatKind.RSS, Version(0, 92), feed=spy),
    ])
    adapter = ResourceAdapter(fromstring(xml), fx_settings, registry=registry)
    with caplog.at_level(logging.WARNING, logger='libsyndication.adapter'):
        assert not adapter.fill(fx_rss_feed, FormatKind.RSS)
    assert not spy.called
    assert fx_rss_feed == before
    assert fx_rss_feed.channel.title == 'Untouched'
    assert any('unsupported' in record.getMessage()
               for record in caplog.records)


def test_fill_unsupported_version_strict(fx_rss_feed, fx_strict_settings):
    before = copy.deepcopy(fx_rss_feed)
    with raises(UnsupportedVersionError) as exc_info:
        fill(fx_rss_feed, FormatKind.RSS,
             fromstring('<rss version="0.5"><channel /></rss>'),
             fx_strict_settings)
    assert exc_info.value.format is FormatKind.RSS
    assert exc_info.value.version == Version(0, 5)
    assert fx_rss_feed == before


def test_fill_atom_kinds(fx_settings):
    document = fromstring(atom_feed)
    feed_spy = mock.Mock(wraps=ATOM10.entry_points['feed'])
    entry_spy = mock.Mock(wraps=ATOM10.entry_points['entry'])
    with mock.patch.dict(ATOM10.entry_points, feed=feed_spy, entry=entry_spy):
        entry = AtomEntry()
        fill(entry, FormatKind.ATOM, document, fx_settings)
        assert entry_spy.call_count == 1
        assert not feed_spy.called
        assert entry.title == Text(value='Atom-Powered Robots Run Amok')
        feed = AtomFeed()
        fill(feed, FormatKind.ATOM, document, fx_settings)
        assert feed_spy.call_count == 1
        assert entry_spy.call_count == 1
        assert feed.title == Text(value='Example Feed')
        assert feed.entries == [entry]


def test_fill_subclassed_targets(fx_settings):
    feed = CustomRssFeed()
    assert fill(feed, FormatKind.RSS, fromstring(rss2_feed), fx_settings)
    assert isinstance(feed, CustomRssFeed)
    assert feed.channel.title == 'Liftoff News'
    entry = CustomAtomEntry()
    assert fill(entry, FormatKind.ATOM, fromstring(atom_feed), fx_settings)
    assert isinstance(entry, CustomAtomEntry)
    assert entry.title == Text(value='Atom-Powered Robots Run Amok')


def test_fill_subclassed_target_format_mismatch(fx_settings):
    feed = CustomRssFeed()
    with raises(FormatMismatchError):
        fill(feed, FormatKind.RSS, fromstring(atom_feed), fx_settings)
    assert feed == CustomRssFeed()


def test_fill_atom_invalid_kind(fx_settings):
    target = AtomSomething(title='Untouched')
    with raises(InvalidTargetError) as exc_info:
        fill(target, FormatKind.ATOM, fromstring(atom_feed), fx_settings)
    assert exc_info.value.target is target
    assert exc_info.value.expected is FormatKind.ATOM
    assert target.title == 'Untouched'


@mark.parametrize('target', [AtomFeed(), object(), 'feed'])
def test_fill_target_of_other_format(target, fx_settings):
    with raises(InvalidTargetError):
        fill(target, FormatKind.RSS, fromstring(rss2_feed), fx_settings)


def test_fill_null_arguments(fx_settings):
    document = fromstring(rss2_feed)
    with raises(NullArgumentError):
        fill(None, FormatKind.RSS, document, fx_settings)
    with raises(NullArgumentError):
        fill(RssFeed(), FormatKind.RSS, None, fx_settings)
    with raises(NullArgumentError):
        fill(RssFeed(), FormatKind.RSS, document, None)
    with raises(TypeError):
        fill(RssFeed(), FormatKind.RSS, document, None)
    with raises(TypeError):
        fill(RssFeed(), FormatKind.RSS, document, {'entity_limit': 1})


@mark.parametrize('expected_format', [FormatKind.UNKNOWN, None, 'rss'])
def test_fill_invalid_expected_format(expected_format, fx_settings):
    target = RssFeed()
    with raises(InvalidExpectedFormatError):
        fill(target, expected_format, fromstring(rss2_feed), fx_settings)
    assert target == RssFeed()


def test_fill_errors_are_fill_errors():
    for error in (NullArgumentError, InvalidExpectedFormatError,
                  FormatMismatchError, InvalidTargetError,
                  UnsupportedVersionError):
        assert issubclass(error, FillError)


def test_fill_idempotent(fx_settings):
    document = fromstring(rss2_feed)
    feed = RssFeed()
    fill(feed, FormatKind.RSS, document, fx_settings)
    first = copy.deepcopy(feed)
    fill(feed, FormatKind.RSS, document, fx_settings)
    assert feed == first
    assert len(feed.channel.items) == 1


def test_fill_variant_failure_leaves_target(fx_rss_feed, fx_settings):
    before = copy.deepcopy(fx_rss_feed)
    document = fromstring('''
        <rss version="2.0">
            <channel>
                <title>Broken</title>
                <pubDate>not a date at all</pubDate>
            </channel>
        </rss>
    ''')
    with raises(DecodeError):
        fill(fx_rss_feed, FormatKind.RSS, document, fx_settings)
    assert fx_rss_feed == before


def test_fill_rss2_scenario(fx_settings):
    feed = RssFeed()
    feed_spy = mock.Mock(wraps=RSS20.entry_points['feed'])
    with mock.patch.dict(RSS20.entry_points, feed=feed_spy):
        assert fill(feed, FormatKind.RSS, fromstring(rss2_feed), fx_settings)
    assert feed_spy.call_count == 1
    assert feed.version == Version(2, 0)
    assert feed.channel.title == 'Liftoff News'
    assert feed.channel.items[0].title == 'Star City'


def test_fill_atom_document_as_rss_scenario(fx_settings):
    feed = RssFeed()
    with raises(FormatMismatchError) as exc_info:
        fill(feed, FormatKind.RSS, fromstring(atom_feed), fx_settings)
    assert exc_info.value.expected is FormatKind.RSS
    assert exc_info.value.detected is FormatKind.ATOM
    assert feed == RssFeed()


def test_resource_adapter_reuse(fx_settings):
    adapter = ResourceAdapter(fromstring(atom_feed), fx_settings)
    feed = AtomFeed()
    entry = AtomEntry()
    assert adapter.fill(feed, FormatKind.ATOM)
    assert adapter.fill(entry, FormatKind.ATOM)
    assert feed.entries[0] == entry
