""":mod:`libsyndication.parser` --- Parser variants
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

One parser variant per supported pair of format and version.  Variants
are not meant to be used directly; :mod:`libsyndication.registry` maps
fingerprints to them and :mod:`libsyndication.adapter` invokes them.

"""
