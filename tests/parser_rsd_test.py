from libsyndication.compat.etree import fromstring
from libsyndication.format import Version
from libsyndication.parser.rsd import RSD06, RSD10
from libsyndication.rsd import RsdApi, RsdSetting
from libsyndication.settings import LoadSettings


rsd10_xml = '''
<rsd version="1.0" xmlns="http://archipelago.phrasewise.com/rsd">
    <service>
        <engineName>Blog Munging CMS</engineName>
        <engineLink>http://www.blogmunging.com/</engineLink>
        <homePageLink>http://www.userdomain.com/</homePageLink>
        <apis>
            <api name="MetaWeblog" preferred="true"
                 apiLink="http://example.com/xml/rpc/url" blogID="123abc" />
            <api name="Blogger" preferred="false"
                 apiLink="http://example.com/xml/rpc/url" blogID="123abc" />
            <api name="Atom" apiLink="http://example.com/atom"
                 blogID="">
                <settings>
                    <docs>http://www.atomenabled.org/</docs>
                    <notes>Additional explanation.</notes>
                    <setting name="service-specific-setting">a value</setting>
                    <setting>nameless</setting>
                    <setting name="another">another value</setting>
                </settings>
            </api>
        </apis>
    </service>
</rsd>
'''


def test_rsd10():
    document = RSD10.parse('document', fromstring(rsd10_xml))
    assert document.version == Version(1, 0)
    service = document.service
    assert service.engine_name == 'Blog Munging CMS'
    assert service.engine_link == 'http://www.blogmunging.com/'
    assert service.homepage_link == 'http://www.userdomain.com/'
    assert [api.name for api in service.apis] == ['MetaWeblog', 'Blogger',
                                                  'Atom']
    metaweblog, blogger, atom = service.apis
    assert metaweblog == RsdApi(name='MetaWeblog', is_preferred=True,
                                api_link='http://example.com/xml/rpc/url',
                                blog_id='123abc')
    assert not blogger.is_preferred
    assert not atom.is_preferred
    assert atom.blog_id == ''
    assert atom.docs == 'http://www.atomenabled.org/'
    assert atom.notes == 'Additional explanation.'
    assert atom.settings == [
        RsdSetting(name='service-specific-setting', value='a value'),
        RsdSetting(name='another', value='another value'),
    ]


def test_rsd06_without_namespace():
    document = RSD06.parse('document', fromstring('''
        <rsd version="0.6">
            <service>
                <engineName>WordPress</engineName>
                <apis>
                    <api name="WordPress" preferred="true"
                         apiLink="http://example.com/xmlrpc.php" blogID="1" />
                </apis>
            </service>
        </rsd>
    '''))
    assert document.version == Version(0, 6)
    assert document.service.engine_name == 'WordPress'
    api, = document.service.apis
    assert api.is_preferred
    assert api.settings == []


def test_rsd_entity_limit():
    document = RSD10.parse('document', fromstring(rsd10_xml),
                           LoadSettings(entity_limit=1))
    api, = document.service.apis
    assert api.name == 'MetaWeblog'
