""":mod:`libsyndication` --- Syndication document loading
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Recognizes which syndication dialect (APML, Atom, BlogML, OPML, RSD, RSS)
and which version of it an already parsed XML document is, and fills
the matching in-memory document object from it.

"""
