""":mod:`libsyndication.adapter` --- Filling resources from documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

The entry point of the library.  :func:`fill()` guesses the format and
the version of a parsed XML document, finds the parser variant for them,
and fills the given resource with the parsed result::

    from libsyndication.adapter import fill
    from libsyndication.compat.etree import fromstring
    from libsyndication.format import FormatKind
    from libsyndication.rss import RssFeed
    from libsyndication.settings import LoadSettings

    feed = RssFeed()
    fill(feed, FormatKind.RSS, fromstring(xml), LoadSettings())

The caller has to tell what format it expects, and the document has to
be of that format.  Any failure leaves the resource as it was, since
variants parse into a new resource which replaces the state of the given
resource only after parsing has completed.

When the format is recognized but its version isn't supported,
:func:`fill()` does nothing but log a warning, unless
:attr:`LoadSettings.strict_versions
<libsyndication.settings.LoadSettings.strict_versions>` is set.  Then it
raises :exc:`UnsupportedVersionError`.

"""
import logging

from .compat.etree import get_root
from .fingerprint import extract_fingerprint
from .format import FormatKind
from .registry import REGISTRY
from .resource import SyndicationResource
from .settings import LoadSettings

__all__ = ('FillError', 'FormatMismatchError', 'InvalidExpectedFormatError',
           'InvalidTargetError', 'NullArgumentError', 'ResourceAdapter',
           'UnsupportedVersionError', 'fill')


class FillError(Exception):
    """The base exception of failures of :func:`fill()`."""


class NullArgumentError(FillError, TypeError):
    """Raised when a required argument is :const:`None`."""


class InvalidExpectedFormatError(FillError, ValueError):
    """Raised when the expected format is
    :attr:`~libsyndication.format.FormatKind.UNKNOWN` or not a
    :class:`~libsyndication.format.FormatKind` at all.

    """


class FormatMismatchError(FillError, ValueError):
    """Raised when the format of the document differs from the expected
    one.

    :param expected: the expected format
    :type expected: :class:`~libsyndication.format.FormatKind`
    :param detected: the format of the document
    :type detected: :class:`~libsyndication.format.FormatKind`

    """

    def __init__(self, expected, detected):
        super(FormatMismatchError, self).__init__(
            'expected {0} document, but it is {1}'.format(expected, detected)
        )
        #: (:class:`~libsyndication.format.FormatKind`) The expected format.
        self.expected = expected
        #: (:class:`~libsyndication.format.FormatKind`) The format of
        #: the document.
        self.detected = detected


class InvalidTargetError(FillError, TypeError):
    """Raised when the target resource doesn't belong to the expected
    format, or the parser variant cannot fill the kind of the target.

    :param target: the target resource
    :param expected: the expected format
    :type expected: :class:`~libsyndication.format.FormatKind`

    """

    def __init__(self, target, expected, message=None):
        if message is None:
            message = '{0!r} is not a {1} resource'.format(target, expected)
        super(InvalidTargetError, self).__init__(message)
        #: The target resource.
        self.target = target
        #: (:class:`~libsyndication.format.FormatKind`) The expected format.
        self.expected = expected


class UnsupportedVersionError(FillError, ValueError):
    """Raised when the format of the document is recognized, but its
    version is not supported.  It's raised only if
    :attr:`~libsyndication.settings.LoadSettings.strict_versions` is set.

    :param format: the format of the document
    :type format: :class:`~libsyndication.format.FormatKind`
    :param version: the version of the document, or :const:`None` if
                    it's missing or malformed
    :type version: :class:`~libsyndication.format.Version`

    """

    def __init__(self, format, version):
        super(UnsupportedVersionError, self).__init__(
            'unsupported {0} version: {1}'.format(
                format, 'unknown' if version is None else version
            )
        )
        #: (:class:`~libsyndication.format.FormatKind`) The format.
        self.format = format
        #: (:class:`~libsyndication.format.Version`) The unsupported version.
        self.version = version


class ResourceAdapter(object):
    """Fills resources from the ``document`` with the ``settings``.

    :param document: a parsed XML document, either an element tree or
                     its root element
    :param settings: the load settings
    :type settings: :class:`~libsyndication.settings.LoadSettings`
    :param registry: the registry of parser variants.
                     :const:`~libsyndication.registry.REGISTRY` by default
    :type registry: :class:`~libsyndication.registry.AdapterRegistry`
    :raises NullArgumentError: when ``document`` or ``settings`` is
                               :const:`None`

    """

    def __init__(self, document, settings, registry=REGISTRY):
        if document is None:
            raise NullArgumentError('document is required')
        elif settings is None:
            raise NullArgumentError('settings is required')
        elif not isinstance(settings, LoadSettings):
            raise TypeError(
                'settings must be a {0.__module__}.{0.__name__}, not '
                '{1!r}'.format(LoadSettings, settings)
            )
        self.document = document
        self.settings = settings
        self.registry = registry

    def fill(self, target, expected_format):
        """Fill the ``target`` with the document.

        :param target: the resource to fill
        :type target: :class:`~libsyndication.resource.SyndicationResource`
        :param expected_format: the format the document has to be in
        :type expected_format: :class:`~libsyndication.format.FormatKind`
        :returns: whether the ``target`` has been filled.  :const:`False`
                  if the version of the document is not supported
        :rtype: :class:`bool`
        :raises NullArgumentError: when ``target`` is :const:`None`
        :raises InvalidExpectedFormatError: when ``expected_format`` is
                                            not a known format
        :raises InvalidTargetError: when the ``target`` is not
                                    a resource of the ``expected_format``
        :raises FormatMismatchError: when the document is not in
                                     the ``expected_format``
        :raises UnsupportedVersionError: when the version of the document
                                         is not supported in strict mode

        """
        logger = logging.getLogger(__name__ + '.ResourceAdapter.fill')
        if target is None:
            raise NullArgumentError('target is required')
        elif not isinstance(expected_format, FormatKind) or \
                expected_format is FormatKind.UNKNOWN:
            raise InvalidExpectedFormatError(
                'expected_format must be a known {0.__module__}.{0.__name__}, '
                'not {1!r}'.format(FormatKind, expected_format)
            )
        elif not isinstance(target, SyndicationResource) or \
                target.resource_format is not expected_format:
            raise InvalidTargetError(target, expected_format)
        fingerprint = extract_fingerprint(self.document)
        if fingerprint.format is not expected_format:
            raise FormatMismatchError(expected_format, fingerprint.format)
        variant = self.registry.resolve(fingerprint.key)
        if variant is None:
            if self.settings.strict_versions:
                raise UnsupportedVersionError(fingerprint.format,
                                              fingerprint.version)
            logger.warning('unsupported %s version (%s); %r is left as it is',
                           fingerprint.format,
                           fingerprint.version or 'unknown', target)
            return False
        kind = target.resource_kind
        if variant.entry_point(kind) is None:
            raise InvalidTargetError(
                target, expected_format,
                '{0!r} cannot fill {1} resources'.format(variant, kind)
            )
        logger.debug('%r fills %r', variant, target)
        resource = variant.parse(kind, get_root(self.document),
                                  self.settings)
        target.load_state(resource)
        return True


def fill(target, expected_format, document, settings):
    """Fill the ``target`` resource with the ``document`` which has to be
    in the ``expected_format``.  See also :meth:`ResourceAdapter.fill()`.

    :param target: the resource to fill
    :type target: :class:`~libsyndication.resource.SyndicationResource`
    :param expected_format: the format the document has to be in
    :type expected_format: :class:`~libsyndication.format.FormatKind`
    :param document: a parsed XML document, either an element tree or
                     its root element
    :param settings: the load settings
    :type settings: :class:`~libsyndication.settings.LoadSettings`
    :returns: whether the ``target`` has been filled
    :rtype: :class:`bool`

    """
    if target is None:
        raise NullArgumentError('target is required')
    return ResourceAdapter(document, settings).fill(target, expected_format)
