""":mod:`libsyndication.schema` --- Declarative element model
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects are declared by defining classes whose attributes are
descriptors, a thing like ORM for XML.  For example::

    class Person(Element):
        name = Value()
        urls = ValueList()
        born_at = Value()

Single values default to :const:`None` (or the given ``default``), and
multiple values are lists that are created on first access.  Values are
stored per instance, so two elements compare equal when they are of
the same type and all of their declared values are equal.

"""
import collections.abc

__all__ = 'Descriptor', 'Element', 'Value', 'ValueList', 'inspect_descriptors'


class Descriptor(object):
    """Abstract base class for :class:`Value` and :class:`ValueList`."""

    #: (:class:`bool`) Whether it can be zero or more for the element.
    multiple = False

    def __init__(self, default=None):
        self.default = default

    def __get__(self, obj, cls=None):
        if isinstance(obj, Element):
            return obj._data.get(self, self.default)
        return self

    def __set__(self, obj, value):
        obj._data[self] = value

    def __deepcopy__(self, memo):
        # Values of elements are keyed by their descriptors.
        return self


class Value(Descriptor):
    """Declare a single value of the element."""


class ValueList(Descriptor):
    """Declare zero or more values of the element.  Getting the attribute
    always returns the same mutable :class:`list`.

    """

    multiple = True

    def __init__(self):
        super(ValueList, self).__init__(default=None)

    def __get__(self, obj, cls=None):
        if isinstance(obj, Element):
            try:
                return obj._data[self]
            except KeyError:
                values = obj._data[self] = []
                return values
        return self

    def __set__(self, obj, value):
        if not isinstance(value, collections.abc.Iterable) or \
           isinstance(value, (str, bytes)):
            raise TypeError('expected an iterable, not ' + repr(value))
        obj._data[self] = list(value)


_descriptors_cache = {}


def inspect_descriptors(element_type):
    """Get the mapping of attribute names to descriptors of the given
    ``element_type``, including inherited ones.

    :param element_type: the element type to inspect
    :type element_type: :class:`type`
    :returns: the ordered mapping of attribute names to descriptors
    :rtype: :class:`dict`

    """
    if not isinstance(element_type, type):
        raise TypeError('expected a type, not ' + repr(element_type))
    try:
        return _descriptors_cache[element_type]
    except KeyError:
        pass
    descriptors = {}
    for cls in reversed(element_type.__mro__):
        for name, value in vars(cls).items():
            if isinstance(value, Descriptor):
                descriptors[name] = value
    _descriptors_cache[element_type] = descriptors
    return descriptors


class Element(object):
    """Represent an element.  It takes initial values of declared
    attributes as keyword arguments.

    """

    def __init__(self, **attributes):
        self._data = {}
        descriptors = inspect_descriptors(type(self))
        for name, value in attributes.items():
            if name not in descriptors:
                raise TypeError(
                    '{0!r} is an invalid attribute of {1.__module__}.'
                    '{1.__name__}'.format(name, type(self))
                )
            setattr(self, name, value)

    def _snapshot(self):
        return dict(
            (name, getattr(self, name))
            for name in inspect_descriptors(type(self))
        )

    def __eq__(self, other):
        return (type(self) is type(other) and
                self._snapshot() == other._snapshot())

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __repr__(self):
        values = []
        for name, descriptor in inspect_descriptors(type(self)).items():
            value = getattr(self, name)
            if value == descriptor.default or \
               descriptor.multiple and not value:
                continue
            values.append('{0}={1!r}'.format(name, value))
        return '{0.__module__}.{0.__name__}({1})'.format(
            type(self), ', '.join(values)
        )
