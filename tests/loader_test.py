from pytest import raises

from libsyndication.adapter import FormatMismatchError, NullArgumentError
from libsyndication.format import FormatKind, Version
from libsyndication.loader import load, parse_document
from libsyndication.opml import OpmlDocument
from libsyndication.rss import RssFeed
from libsyndication.settings import LoadSettings


opml_xml = '''<?xml version="1.0" encoding="euc-kr"?>
<opml version="2.0">
    <head><title>구독 목록</title></head>
    <body><outline text="예제 블로그" /></body>
</opml>
'''


def test_parse_document_bytes():
    root = parse_document(opml_xml.encode('euc-kr'))
    assert root.tag == 'opml'
    assert root.find('head/title').text == '구독 목록'


def test_parse_document_string():
    root = parse_document(opml_xml)
    assert root.find('body/outline').get('text') == '예제 블로그'


def test_parse_document_character_encoding():
    # declares utf-8 but is actually encoded in euc-kr
    xml = opml_xml.replace('euc-kr', 'utf-8').encode('euc-kr')
    settings = LoadSettings(character_encoding='euc-kr')
    root = parse_document(xml, settings)
    assert root.find('head/title').text == '구독 목록'


def test_parse_document_null():
    with raises(NullArgumentError):
        parse_document(None)


def test_load(fx_settings):
    target = OpmlDocument()
    assert load(opml_xml.encode('euc-kr'), target, FormatKind.OPML,
                fx_settings) is target
    assert target.version == Version(2, 0)
    assert target.head.title == '구독 목록'
    assert [o.text for o in target.outlines] == ['예제 블로그']


def test_load_default_settings():
    target = load(opml_xml, OpmlDocument(), FormatKind.OPML)
    assert target.version == Version(2, 0)


def test_load_mismatch():
    target = RssFeed()
    with raises(FormatMismatchError):
        load(opml_xml, target, FormatKind.RSS)
    assert target.channel is None
