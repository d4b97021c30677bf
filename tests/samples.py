"""Minimal documents of every supported format and version."""
from libsyndication.apml import ApmlDocument
from libsyndication.blogml import BlogMLDocument
from libsyndication.feed import AtomFeed
from libsyndication.format import FormatKind, Version
from libsyndication.opml import OpmlDocument
from libsyndication.rsd import RsdDocument
from libsyndication.rss import RssFeed


def rss(version):
    return '''<rss version="{0}">
        <channel>
            <title>Minimal RSS {0}</title>
            <link>http://example.com/</link>
            <description>Minimal</description>
        </channel>
    </rss>'''.format(version)


def rdf(xmlns):
    return '''<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
                       xmlns="{0}">
        <channel>
            <title>Minimal RDF</title>
            <link>http://example.com/</link>
        </channel>
    </rdf:RDF>'''.format(xmlns)


def opml(version):
    return '''<opml version="{0}">
        <head><title>Minimal OPML {0}</title></head>
        <body><outline text="Example" /></body>
    </opml>'''.format(version)


#: (format, version, resource type, xml) of every supported pair.
MINIMAL_DOCUMENTS = [
    (FormatKind.APML, Version(0, 6), ApmlDocument, '''
        <APML xmlns="http://www.apml.org/apml-0.6" version="0.6">
            <Head><Title>Minimal APML</Title></Head>
            <Body defaultprofile="Work" />
        </APML>
    '''),
    (FormatKind.ATOM, Version(0, 3), AtomFeed, '''
        <feed xmlns="http://purl.org/atom/ns#" version="0.3">
            <title>Minimal Atom 0.3</title>
        </feed>
    '''),
    (FormatKind.ATOM, Version(1, 0), AtomFeed, '''
        <feed xmlns="http://www.w3.org/2005/Atom">
            <title>Minimal Atom 1.0</title>
        </feed>
    '''),
    (FormatKind.BLOGML, Version(2, 0), BlogMLDocument, '''
        <blog xmlns="http://www.blogml.com/2006/09/BlogML"
              root-url="http://example.com/">
            <title type="text">Minimal BlogML</title>
        </blog>
    '''),
    (FormatKind.OPML, Version(1, 0), OpmlDocument, opml('1.0')),
    (FormatKind.OPML, Version(1, 1), OpmlDocument, opml('1.1')),
    (FormatKind.OPML, Version(2, 0), OpmlDocument, opml('2.0')),
    (FormatKind.RSD, Version(0, 6), RsdDocument, '''
        <rsd version="0.6">
            <service><engineName>Minimal</engineName></service>
        </rsd>
    '''),
    (FormatKind.RSD, Version(1, 0), RsdDocument, '''
        <rsd version="1.0" xmlns="http://archipelago.phrasewise.com/rsd">
            <service><engineName>Minimal</engineName></service>
        </rsd>
    '''),
    (FormatKind.RSS, Version(0, 9), RssFeed,
     rdf('http://my.netscape.com/rdf/simple/0.9/')),
    (FormatKind.RSS, Version(0, 91), RssFeed, rss('0.91')),
    (FormatKind.RSS, Version(0, 92), RssFeed, rss('0.92')),
    (FormatKind.RSS, Version(1, 0), RssFeed, rdf('http://purl.org/rss/1.0/')),
    (FormatKind.RSS, Version(2, 0), RssFeed, rss('2.0')),
]


#: One document per format.
DOCUMENT_PER_FORMAT = dict(
    (format, (resource_type, xml))
    for format, _, resource_type, xml in MINIMAL_DOCUMENTS
)
