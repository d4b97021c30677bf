""":mod:`libsyndication.parser.apml` --- APML parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Parsing Attention Profiling Markup Language 0.6.  The document consists
of a ``Head`` and a ``Body``; the latter contains named ``Profile``
elements and application-specific data:

.. code-block:: xml

   <APML xmlns="http://www.apml.org/apml-0.6" version="0.6">
     <Head><Title>Example</Title></Head>
     <Body defaultprofile="Work">
       <Profile name="Work">
         <ImplicitData>
           <Concepts>
             <Concept key="atom" value="0.9" from="example.com"
                      updated="2007-03-11T01:55:00Z" />
           </Concepts>
         </ImplicitData>
       </Profile>
     </Body>
   </APML>

Documents without the namespace are parsed as well.

"""
import copy
import functools

from ..apml import (ApmlApplication, ApmlAuthor, ApmlConcept, ApmlData,
                    ApmlDocument, ApmlHead, ApmlProfile, ApmlSource)
from ..codecs import DecodeError
from ..compat.etree import is_element
from ..format import APML_XMLNS, FormatKind, Version
from ..resource import Extension
from .base import ParserBase, ParserVariant, collect, get_element_id
from .common import get_text, parse_datetime

__all__ = 'APML06', 'apml_parser', 'parse_apml'


#: (:class:`list`) APML elements are looked up in these namespaces.
APML_NAMESPACES = [None, APML_XMLNS]


def decode_attention(text):
    """Decode the attention ``value`` attribute, a real number between
    -1.0 and 1.0.

    :raises libsyndication.codecs.DecodeError: when it's not a number

    """
    if text is None or not text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        raise DecodeError('invalid attention value: {0!r}'.format(text))


def concept_attributes(element):
    return dict(
        key=element.get('key'),
        value=decode_attention(element.get('value')),
        origin=element.get('from'),
        updated_on=parse_datetime(element.get('updated'))
    )


def text_parser(element, session):
    return get_text(element), session


def datetime_parser(element, session):
    return parse_datetime(element.text), session


def document_parser(element, session):
    return ApmlDocument(), session


def head_parser(element, session):
    return ApmlHead(), session


def concept_parser(element, session):
    return ApmlConcept(**concept_attributes(element)), session


def author_parser(element, session):
    return ApmlAuthor(**concept_attributes(element)), session


def source_parser(element, session):
    return ApmlSource(
        key=element.get('key'),
        name=element.get('name'),
        value=decode_attention(element.get('value')),
        type=element.get('type'),
        origin=element.get('from'),
        updated_on=parse_datetime(element.get('updated'))
    ), session


def data_parser(element, session):
    return ApmlData(), session


def profile_parser(element, session):
    return ApmlProfile(name=element.get('name')), session


def application_parser(element, session):
    application = ApmlApplication(name=element.get('name'))
    for child in element:
        if not is_element(child):
            continue
        elif not session.accepts(application.data):
            break
        application.data.append(Extension.from_element(child))
    return application, session


def build_apml_parser():
    """Build the parser tree for the ``APML`` root.  The ``Body`` is
    not part of the tree, since its contents belong to the document
    itself.  See :func:`parse_apml()`.

    :returns: the pair of the root parser and the parser of ``Body``
              children
    :rtype: :class:`tuple`

    """
    ns = APML_NAMESPACES
    root = ParserBase(document_parser)
    head = root.register('Head', ParserBase(head_parser), 'head', ns)
    for name, parser, attr_name in [
        ('Title', text_parser, 'title'),
        ('Generator', text_parser, 'generator'),
        ('UserEmail', text_parser, 'user_email'),
        ('DateCreated', datetime_parser, 'created_on'),
    ]:
        head.register(name, ParserBase(parser), attr_name, ns)
    source = ParserBase(source_parser)
    source.register('Author', ParserBase(author_parser), 'authors', ns)
    data = ParserBase(data_parser)
    data.register('Concepts',
                  ParserBase(collect(ParserBase(concept_parser), 'Concept',
                                     ns)),
                  'concepts', ns)
    data.register('Sources', ParserBase(collect(source, 'Source', ns)),
                  'sources', ns)
    profile = ParserBase(profile_parser)
    profile.register('ImplicitData', data, 'implicit_data', ns)
    profile.register('ExplicitData', data, 'explicit_data', ns)
    body = ParserBase(document_parser)
    body.register('Profile', profile, 'profiles', ns)
    body.register('Applications',
                  ParserBase(collect(ParserBase(application_parser),
                                     'Application', ns)),
                  'applications', ns)
    return root, body


apml_parser, body_parser = build_apml_parser()


def parse_apml(root, session, version):
    """Parse the ``APML`` root.

    :returns: the parsed document
    :rtype: :class:`~libsyndication.apml.ApmlDocument`

    """
    document = apml_parser(root, session)
    document.version = version
    for namespace in APML_NAMESPACES:
        body_element = root.find(get_element_id(namespace, 'Body'))
        if body_element is not None:
            break
    if body_element is not None:
        body = body_parser(body_element, copy.copy(session))
        document.default_profile = body_element.get('defaultprofile')
        document.profiles = body.profiles
        document.applications = body.applications
        document.extensions.extend(body.extensions)
    return document


#: (:class:`~libsyndication.parser.base.ParserVariant`) APML 0.6.
APML06 = ParserVariant(
    FormatKind.APML, Version(0, 6),
    namespaces=[APML_XMLNS],
    document=functools.partial(parse_apml, version=Version(0, 6))
)
