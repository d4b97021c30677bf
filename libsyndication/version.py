""":mod:`libsyndication.version` --- Version data
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

"""

#: (:class:`str`) The version string e.g. ``'1.2.3'``.
VERSION = '0.1.0'
