import datetime

from pytest import fixture, raises

from libsyndication.apml import ApmlAuthor, ApmlConcept
from libsyndication.codecs import DecodeError
from libsyndication.compat.etree import fromstring
from libsyndication.format import Version
from libsyndication.parser.apml import APML06, decode_attention
from libsyndication.settings import LoadSettings
from libsyndication.tz import utc


apml_xml = '''<APML xmlns="http://www.apml.org/apml-0.6" version="0.6"
      xmlns:ext="http://example.com/ext">
    <Head>
        <Title>Example APML file for apml.org</Title>
        <Generator>Written by Hand</Generator>
        <UserEmail>sample@apml.org</UserEmail>
        <DateCreated>2007-03-11T01:55:00Z</DateCreated>
    </Head>
    <Body defaultprofile="Work">
        <Profile name="Home">
            <ImplicitData>
                <Concepts>
                    <Concept key="attention" value="0.99" from="GatheringTool.com"
                             updated="2007-03-11T01:55:00Z" />
                    <Concept key="content distribution" value="0.97"
                             from="GatheringTool.com"
                             updated="2007-03-11T01:55:00Z" />
                </Concepts>
                <Sources>
                    <Source key="http://feeds.feedburner.com/apmlspec"
                            name="APML.org" value="1.00" type="application/rss+xml"
                            from="GatheringTool.com"
                            updated="2007-03-11T01:55:00Z">
                        <Author key="Sample" value="0.5" from="GatheringTool.com"
                                updated="2007-03-11T01:55:00Z" />
                    </Source>
                </Sources>
            </ImplicitData>
            <ExplicitData>
                <Concepts>
                    <Concept key="direct attention" value="0.99" />
                </Concepts>
            </ExplicitData>
        </Profile>
        <Profile name="Work">
            <ImplicitData />
            <ExplicitData>
                <Concepts>
                    <Concept key="dropped" value="-0.4" />
                </Concepts>
            </ExplicitData>
        </Profile>
        <Applications>
            <Application name="sample.com">
                <SampleAppEl setting="on">value</SampleAppEl>
            </Application>
        </Applications>
        <ext:foo>bar</ext:foo>
    </Body>
</APML>
'''


@fixture
def fx_document():
    return APML06.parse('document', fromstring(apml_xml))


def test_decode_attention():
    assert decode_attention('0.5') == 0.5
    assert decode_attention(' -1 ') == -1.0
    assert decode_attention(None) is None
    assert decode_attention('') is None
    with raises(DecodeError):
        decode_attention('high')


def test_apml_head(fx_document):
    assert fx_document.version == Version(0, 6)
    head = fx_document.head
    assert head.title == 'Example APML file for apml.org'
    assert head.generator == 'Written by Hand'
    assert head.user_email == 'sample@apml.org'
    assert head.created_on == datetime.datetime(2007, 3, 11, 1, 55,
                                                tzinfo=utc)


def test_apml_profiles(fx_document):
    assert fx_document.default_profile == 'Work'
    assert [p.name for p in fx_document.profiles] == ['Home', 'Work']
    home, work = fx_document.profiles
    concepts = home.implicit_data.concepts
    assert concepts[0] == ApmlConcept(
        key='attention', value=0.99, origin='GatheringTool.com',
        updated_on=datetime.datetime(2007, 3, 11, 1, 55, tzinfo=utc)
    )
    assert [c.key for c in concepts] == ['attention', 'content distribution']
    source, = home.implicit_data.sources
    assert source.key == 'http://feeds.feedburner.com/apmlspec'
    assert source.name == 'APML.org'
    assert source.value == 1.0
    assert source.type == 'application/rss+xml'
    assert source.authors == [ApmlAuthor(
        key='Sample', value=0.5, origin='GatheringTool.com',
        updated_on=datetime.datetime(2007, 3, 11, 1, 55, tzinfo=utc)
    )]
    direct, = home.explicit_data.concepts
    assert direct.key == 'direct attention'
    assert direct.origin is None
    assert work.implicit_data.concepts == []
    assert work.explicit_data.concepts[0].value == -0.4


def test_apml_applications(fx_document):
    application, = fx_document.applications
    assert application.name == 'sample.com'
    data, = application.data
    assert data.name == 'SampleAppEl'
    assert data.namespace == 'http://www.apml.org/apml-0.6'
    assert data.attributes == {'setting': 'on'}
    assert data.text == 'value'


def test_apml_extensions(fx_document):
    extension, = fx_document.extensions
    assert extension.namespace == 'http://example.com/ext'
    assert extension.text == 'bar'


def test_apml_without_namespace():
    document = APML06.parse('document', fromstring('''
        <APML version="0.6">
            <Head><Title>No namespace</Title></Head>
            <Body defaultprofile="Home">
                <Profile name="Home" />
            </Body>
        </APML>
    '''))
    assert document.head.title == 'No namespace'
    assert document.default_profile == 'Home'
    profile, = document.profiles
    assert profile.implicit_data is None


def test_apml_without_body():
    document = APML06.parse('document', fromstring(
        '<APML version="0.6"><Head /></APML>'
    ))
    assert document.default_profile is None
    assert document.profiles == []


def test_apml_entity_limit():
    document = APML06.parse('document', fromstring(apml_xml),
                            LoadSettings(entity_limit=1))
    profile, = document.profiles
    assert len(profile.implicit_data.concepts) == 1


def test_apml_invalid_attention():
    with raises(DecodeError):
        APML06.parse('document', fromstring('''
            <APML version="0.6">
                <Body><Profile name="Home"><ExplicitData><Concepts>
                    <Concept key="x" value="high" />
                </Concepts></ExplicitData></Profile></Body>
            </APML>
        '''))
