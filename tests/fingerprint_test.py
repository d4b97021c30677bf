import xml.etree.ElementTree

from pytest import mark

from libsyndication.compat.etree import fromstring, tostring
from libsyndication.fingerprint import extract_fingerprint
from libsyndication.format import (UNKNOWN_FINGERPRINT, Fingerprint,
                                   FormatKind, Version)
from .samples import MINIMAL_DOCUMENTS


@mark.parametrize(('format', 'version', 'xml'), [
    (format, version, xml) for format, version, _, xml in MINIMAL_DOCUMENTS
])
def test_extract_fingerprint(format, version, xml):
    fingerprint = extract_fingerprint(fromstring(xml))
    assert fingerprint == Fingerprint(format, version)
    assert fingerprint.recognized


@mark.parametrize('xml', [
    '<html><head><title>Not a feed</title></head></html>',
    '<feed><title>Atom without namespace</title></feed>',
    '<entry xmlns="http://example.com/not-atom"><title>x</title></entry>',
    '<rss xmlns="http://example.com/" version="2.0" />',
    '<blog><title>BlogML without namespace</title></blog>',
    '<RDF><channel /></RDF>',
])
def test_extract_fingerprint_unknown(xml):
    assert extract_fingerprint(fromstring(xml)) == UNKNOWN_FINGERPRINT


def test_extract_fingerprint_none():
    assert extract_fingerprint(None) == UNKNOWN_FINGERPRINT


def test_extract_fingerprint_atom_entry():
    fingerprint = extract_fingerprint(fromstring(
        '<entry xmlns="http://www.w3.org/2005/Atom"><title>x</title></entry>'
    ))
    assert fingerprint == Fingerprint(FormatKind.ATOM, Version(1, 0))


def test_extract_fingerprint_atom_namespace_wins_over_attribute():
    fingerprint = extract_fingerprint(fromstring(
        '<feed xmlns="http://www.w3.org/2005/Atom" version="0.3" />'
    ))
    assert fingerprint.version == Version(1, 0)


@mark.parametrize(('xml', 'format'), [
    ('<rss><channel /></rss>', FormatKind.RSS),
    ('<rss version="two"><channel /></rss>', FormatKind.RSS),
    ('<opml version=""><body /></opml>', FormatKind.OPML),
    ('<rsd><service /></rsd>', FormatKind.RSD),
    ('<APML><Body /></APML>', FormatKind.APML),
    ('<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">'
     '<channel /></rdf:RDF>', FormatKind.RSS),
])
def test_extract_fingerprint_without_version(xml, format):
    fingerprint = extract_fingerprint(fromstring(xml))
    assert fingerprint.format is format
    assert fingerprint.version is None


@mark.parametrize(('xml', 'version'), [
    ('<rss version="0.5"><channel /></rss>', Version(0, 5)),
    ('<rss version=" 2.0.1 "><channel /></rss>', Version(2, 0, 1)),
    ('<opml version="3.0"><body /></opml>', Version(3, 0)),
])
def test_extract_fingerprint_unsupported_version(xml, version):
    assert extract_fingerprint(fromstring(xml)).version == version


def test_extract_fingerprint_version_from_namespace():
    blog = extract_fingerprint(fromstring(
        '<blog xmlns="http://www.blogml.com/2006/09/BlogML" />'
    ))
    assert blog == Fingerprint(FormatKind.BLOGML, Version(2, 0))
    apml = extract_fingerprint(fromstring(
        '<APML xmlns="http://www.apml.org/apml-0.6"><Body /></APML>'
    ))
    assert apml == Fingerprint(FormatKind.APML, Version(0, 6))


def test_extract_fingerprint_element_tree():
    root = xml.etree.ElementTree.fromstring('<rss version="0.92" />')
    tree = xml.etree.ElementTree.ElementTree(root)
    assert extract_fingerprint(tree) == \
        Fingerprint(FormatKind.RSS, Version(0, 92))


def test_extract_fingerprint_does_not_change_document():
    _, _, _, document = MINIMAL_DOCUMENTS[-1]
    root = fromstring(document)
    before = tostring(root)
    extract_fingerprint(root)
    extract_fingerprint(root)
    assert tostring(root) == before
