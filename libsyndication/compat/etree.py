""":mod:`libsyndication.compat.etree` --- ElementTree compatibility layer
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

This proxy module offers a compatibility layer between several ElementTree
implementations.

- If there's installed :mod:`lxml` module, use :mod:`lxml.etree`.
- Otherwise, use :mod:`xml.etree.ElementTree`.

Documents produced by either implementation can be passed to
:func:`libsyndication.adapter.fill()`.

It provides the following functions:

.. function:: fromstring(string)

   Parse the given XML ``string``.

   :param string: xml string to parse
   :type string: :class:`str`, :class:`bytes`
   :returns: the root element

.. function:: tostring(tree)

   Generate an XML string from the given element tree.

   :param tree: an element tree object to serialize
   :returns: an xml string
   :rtype: :class:`bytes`

"""
try:
    from lxml.etree import fromstring, tostring
except ImportError:
    from xml.etree.ElementTree import fromstring, tostring

__all__ = 'fromstring', 'get_root', 'is_element', 'tostring'


def get_root(document):
    """Get the root element of the given ``document``.  It accepts both
    element trees (that have ``getroot()`` method) and elements.

    :param document: a parsed xml document
    :returns: the root element, or :const:`None` if ``document`` is
              :const:`None`

    """
    if document is None:
        return None
    getroot = getattr(document, 'getroot', None)
    if callable(getroot):
        return getroot()
    return document


def is_element(node):
    """Whether the given ``node`` is an element.  Comments and processing
    instructions that :mod:`lxml.etree` yields while iterating children
    are not.

    """
    return isinstance(getattr(node, 'tag', None), str)
