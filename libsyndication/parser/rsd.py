""":mod:`libsyndication.parser.rsd` --- RSD parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing Really Simple Discovery 0.6 and 1.0.  Both versions have the same
structure, but 0.6 documents have no namespace while 1.0 documents are in
:const:`~libsyndication.format.RSD_XMLNS`.  Since documents in the wild
mix them up, both versions are parsed by the same parser tree that
accepts elements with or without the namespace.

"""
import functools

from ..codecs import Boolean
from ..compat.etree import is_element
from ..format import RSD_XMLNS, FormatKind, Version
from ..rsd import RsdApi, RsdDocument, RsdService, RsdSetting
from .base import ParserBase, ParserVariant, collect, get_element_id
from .common import get_text

__all__ = 'RSD06', 'RSD10', 'build_rsd_parser', 'parse_rsd', 'rsd_parser'


_preferred = Boolean(default_value=False)


def text_parser(element, session):
    return get_text(element), session


def document_parser(element, session):
    return RsdDocument(), session


def service_parser(element, session):
    return RsdService(), session


def make_api_parser(namespace_set):
    tags = dict(
        (get_element_id(namespace, name), name)
        for namespace in namespace_set
        for name in ('settings', 'docs', 'notes', 'setting')
    )

    def api_parser(element, session):
        api = RsdApi(
            name=element.get('name'),
            is_preferred=_preferred.decode(element.get('preferred')),
            api_link=element.get('apiLink'),
            blog_id=element.get('blogID')
        )
        for settings in element:
            if not is_element(settings) or \
               tags.get(settings.tag) != 'settings':
                continue
            for child in settings:
                if not is_element(child):
                    continue
                name = tags.get(child.tag)
                if name == 'docs':
                    api.docs = get_text(child)
                elif name == 'notes':
                    api.notes = get_text(child)
                elif name == 'setting' and child.get('name'):
                    if session.accepts(api.settings):
                        api.settings.append(RsdSetting(
                            name=child.get('name'),
                            value=get_text(child)
                        ))
        return api, session

    return api_parser


def build_rsd_parser():
    """Build the parser tree for the ``rsd`` root.  Elements are looked
    up in :const:`~libsyndication.format.RSD_XMLNS` and in no namespace.

    :returns: the root parser
    :rtype: :class:`~libsyndication.parser.base.ParserBase`

    """
    ns = [None, RSD_XMLNS]
    root = ParserBase(document_parser)
    service = root.register('service', ParserBase(service_parser),
                            namespace_set=ns)
    for name, attr_name in [('engineName', 'engine_name'),
                            ('engineLink', 'engine_link'),
                            ('homePageLink', 'homepage_link')]:
        service.register(name, ParserBase(text_parser), attr_name, ns)
    api = ParserBase(make_api_parser(ns))
    service.register('apis', ParserBase(collect(api, 'api', ns)), 'apis', ns)
    return root


#: (:class:`~libsyndication.parser.base.ParserBase`) The parser tree
#: every RSD version shares.
rsd_parser = build_rsd_parser()


def parse_rsd(root, session, version):
    """Parse the ``rsd`` root.

    :returns: the parsed document
    :rtype: :class:`~libsyndication.rsd.RsdDocument`

    """
    document = rsd_parser(root, session)
    document.version = version
    return document


def make_rsd_variant(version):
    return ParserVariant(
        FormatKind.RSD, version,
        namespaces=[RSD_XMLNS],
        document=functools.partial(parse_rsd, version=version)
    )


#: (:class:`~libsyndication.parser.base.ParserVariant`) RSD 0.6.
RSD06 = make_rsd_variant(Version(0, 6))

#: (:class:`~libsyndication.parser.base.ParserVariant`) RSD 1.0.
RSD10 = make_rsd_variant(Version(1, 0))
