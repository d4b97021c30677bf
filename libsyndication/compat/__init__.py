""":mod:`libsyndication.compat` --- Compatibility layer
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

This package hides the differences between the XML tree implementations
:mod:`libsyndication` can work on.

"""
