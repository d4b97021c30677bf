""":mod:`libsyndication.blogml` --- BlogML documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Document objects for BlogML 2.0, the format to export and import
the whole content of a blog.

"""
from .format import FormatKind
from .resource import SyndicationResource
from .schema import Element, Value, ValueList

__all__ = ('BlogMLAttachment', 'BlogMLAuthor', 'BlogMLCategory',
           'BlogMLComment', 'BlogMLDocument', 'BlogMLPost', 'BlogMLTrackback')


class BlogMLNode(Element):
    """Common attributes that most BlogML elements have."""

    id = Value()

    title = Value()

    #: (:class:`datetime.datetime`) When it was created.
    created_on = Value()

    #: (:class:`datetime.datetime`) When it was last modified.
    modified_on = Value()

    #: (:class:`bool`) Whether it's approved to be published.
    approved = Value()


class BlogMLAuthor(BlogMLNode):
    """An author of the blog."""

    email = Value()


class BlogMLCategory(BlogMLNode):
    """A category of posts."""

    description = Value()

    #: (:class:`str`) The :attr:`~BlogMLNode.id` of the parent category.
    parent_ref = Value()


class BlogMLComment(BlogMLNode):
    """A comment on a post."""

    #: (:class:`str`) The content of the comment.
    content = Value()

    user_name = Value()

    user_email = Value()

    user_url = Value()


class BlogMLTrackback(BlogMLNode):
    """A trackback to a post."""

    url = Value()


class BlogMLAttachment(Element):
    """A file attached to a post."""

    url = Value()

    mimetype = Value()

    external_uri = Value()

    #: (:class:`bool`) Whether the data is embedded in the document.
    embedded = Value(default=False)

    #: (:class:`int`) The size in bytes.
    size = Value()

    #: (:class:`str`) The base64-encoded data, if embedded.
    data = Value()


class BlogMLPost(BlogMLNode):
    """A post of the blog."""

    #: (:class:`str`) The URL of the post.
    url = Value()

    #: (:class:`str`) Either ``'normal'`` or ``'article'``.
    type = Value()

    #: (:class:`int`) How many times the post has been viewed.
    views = Value()

    #: (:class:`str`) The content of the post.
    content = Value()

    #: (:class:`str`) The slug of the post.
    name = Value()

    excerpt = Value()

    #: (:class:`collections.MutableSequence`) :attr:`~BlogMLNode.id` of
    #: the categories of the post.
    category_refs = ValueList()

    #: (:class:`collections.MutableSequence`) :attr:`~BlogMLNode.id` of
    #: the authors of the post.
    author_refs = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`BlogMLComment`.
    comments = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`BlogMLTrackback`.
    trackbacks = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`BlogMLAttachment`.
    attachments = ValueList()


class BlogMLDocument(SyndicationResource):
    """BlogML document."""

    resource_format = FormatKind.BLOGML

    #: (:class:`~libsyndication.format.Version`) The version of the document.
    version = Value()

    #: (:class:`str`) The URL of the blog.
    root_url = Value()

    #: (:class:`datetime.datetime`) When the document was generated.
    generated_on = Value()

    title = Value()

    subtitle = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`BlogMLAuthor`.
    authors = ValueList()

    #: (:class:`dict`) Extended properties of the blog.
    extended_properties = Value()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`BlogMLCategory`.
    categories = ValueList()

    #: (:class:`collections.MutableSequence`) The list of :class:`BlogMLPost`.
    posts = ValueList()

    #: (:class:`collections.MutableSequence`) The list of
    #: :class:`~libsyndication.resource.Extension` elements.
    extensions = ValueList()
