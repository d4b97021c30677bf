import copy

import mock
from pytest import fixture, raises

from libsyndication.compat.etree import fromstring
from libsyndication.format import FormatKind, Version
from libsyndication.parser.base import (ParserBase, ParserVariant, Session,
                                        collect, get_element_id)
from libsyndication.resource import Extension
from libsyndication.schema import Element, Value, ValueList
from libsyndication.settings import LoadSettings


class SampleRoot(Element):

    title = Value()
    entries = ValueList()
    numbers = ValueList()
    extensions = ValueList()


class SampleEntry(Element):

    value = Value()


root_parser = ParserBase()


@root_parser.path('root')
def sample_root_parser(element, session):
    return SampleRoot(), session


@sample_root_parser.path('title')
def title_parser(element, session):
    return element.text, session


@sample_root_parser.path('entry', attr_name='entries')
def entry_parser(element, session):
    return SampleEntry(value=element.text), session


@sample_root_parser.path('numbers')
def numbers_parser(element, session):
    return [int(number.text) for number in element], session


@sample_root_parser.path('wrapped', attr_name='entries')
def wrapped_parser(element, session):
    return collect(entry_parser, 'entry')(element, session)


test_xml = '''
<root xmlns:ext="http://example.com/ext">
    <title>Title</title>
    <entry>a</entry>
    <entry>b</entry>
    <entry>c</entry>
    <numbers><n>1</n><n>2</n><n>3</n></numbers>
    <unknown>dropped</unknown>
    <ext:foo attr="1"><ext:bar>baz</ext:bar></ext:foo>
    <ext:qux />
</root>
'''


@fixture
def fx_session():
    return Session(LoadSettings())


def parse(xml, settings=None):
    element = fromstring(xml)
    return root_parser.children_parser['root'][0](
        element, Session(settings or LoadSettings())
    )


def test_get_element_id():
    assert get_element_id('http://example.com/', 'a') == \
        '{http://example.com/}a'
    assert get_element_id(None, 'a') == 'a'
    assert get_element_id('', 'a') == 'a'


def test_parser_base():
    root = parse(test_xml)
    assert root.title == 'Title'
    assert root.entries == [SampleEntry(value='a'), SampleEntry(value='b'),
                            SampleEntry(value='c')]
    assert root.numbers == [1, 2, 3]


def test_parser_base_extensions():
    root = parse(test_xml)
    assert len(root.extensions) == 2
    foo, qux = root.extensions
    assert foo == Extension(
        namespace='http://example.com/ext', name='foo', text=None,
        attributes={'attr': '1'},
        children=[Extension(namespace='http://example.com/ext', name='bar',
                            text='baz', attributes={})]
    )
    assert qux.name == 'qux'


def test_parser_base_extensions_disabled():
    root = parse(test_xml, LoadSettings(extensions_enabled=False))
    assert root.extensions == []
    assert root.title == 'Title'


def test_parser_base_max_extension_elements():
    root = parse(test_xml, LoadSettings(max_extension_elements=1))
    assert [e.name for e in root.extensions] == ['foo']


def test_parser_base_entity_limit():
    root = parse(test_xml, LoadSettings(entity_limit=2))
    assert root.entries == [SampleEntry(value='a'), SampleEntry(value='b')]
    assert root.numbers == [1, 2]


def test_collect():
    root = parse('''
        <root>
            <wrapped>
                <entry>a</entry>
                <other>x</other>
                <entry>b</entry>
                <entry>c</entry>
            </wrapped>
        </root>
    ''', LoadSettings(entity_limit=2))
    assert root.entries == [SampleEntry(value='a'), SampleEntry(value='b')]


def test_session_counters_are_shared(fx_session):
    child = copy.copy(fx_session)
    child.xml_base = 'http://example.com/'
    child.counters['extensions'] += 1
    assert fx_session.counters['extensions'] == 1
    assert fx_session.xml_base is None


def test_session_accepts():
    session = Session(LoadSettings(entity_limit=2))
    assert session.accepts([])
    assert session.accepts([1])
    assert not session.accepts([1, 2])
    assert Session(LoadSettings()).accepts(list(range(10000)))


def test_keep_extension_own_namespace():
    session = Session(LoadSettings(), namespaces=['http://example.com/own'])
    owner = SampleRoot()
    element = fromstring('<x xmlns="http://example.com/own" />')
    assert not session.keep_extension(owner, element)
    element = fromstring('<x xmlns="http://example.com/other" />')
    assert session.keep_extension(owner, element)
    assert not session.keep_extension(SampleEntry(), element)
    assert len(owner.extensions) == 1


def test_parser_variant():
    entry_point = mock.Mock(return_value='parsed')
    variant = ParserVariant(FormatKind.RSS, Version(2, 0),
                            namespaces=['http://example.com/'],
                            feed=entry_point)
    assert variant.key == (FormatKind.RSS, Version(2, 0))
    assert variant.entry_point('feed') is entry_point
    assert variant.entry_point('entry') is None
    settings = LoadSettings(entity_limit=3)
    root = fromstring('<rss />')
    assert variant.parse('feed', root, settings) == 'parsed'
    (element, session), _ = entry_point.call_args
    assert element is root
    assert session.settings is settings
    assert session.namespaces == frozenset(['http://example.com/'])
    with raises(KeyError):
        variant.parse('entry', root, settings)
    assert repr(variant) == \
        '<libsyndication.parser.base.ParserVariant RSS 2.0 (feed)>'


def test_parser_variant_default_settings():
    entry_point = mock.Mock(return_value='parsed')
    variant = ParserVariant(FormatKind.OPML, Version(2, 0),
                            document=entry_point)
    variant.parse('document', fromstring('<opml />'))
    (_, session), _ = entry_point.call_args
    assert session.settings == LoadSettings()


def test_parser_variant_type_error():
    with raises(TypeError):
        ParserVariant(FormatKind.UNKNOWN, Version(1, 0), feed=mock.Mock())
    with raises(TypeError):
        ParserVariant('rss', Version(1, 0), feed=mock.Mock())
    with raises(TypeError):
        ParserVariant(FormatKind.RSS, '1.0', feed=mock.Mock())
    with raises(TypeError):
        ParserVariant(FormatKind.RSS, Version(1, 0))
    with raises(TypeError):
        ParserVariant(FormatKind.RSS, Version(1, 0), feed='not callable')
