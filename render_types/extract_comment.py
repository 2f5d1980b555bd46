"""Logic for extracting documentation text from TypeDoc comments."""

from render_types.declaration import Comment, Declaration, Parameter
from render_types.link_resolver import LinkResolver
from render_types.rewrite_inline_links import rewrite_inline_links


def extract_comment(
    comment: Comment | str | None,
    owner: Declaration | Parameter | None,
    link_resolver: LinkResolver | None = None,
) -> str | None:
    """Return the documentation text of a comment, or None if it has none.

    ``comment`` is either a full comment or the bare ``returns`` text of one.
    """
    if comment is None:
        return None
    if isinstance(comment, str):
        text = comment.strip()
    else:
        blocks = [b.strip() for b in (comment.short_text, comment.text) if b]
        text = "\n\n".join(b for b in blocks if b)
    if not text:
        return None

    # Parameters have no enclosing scope; their links resolve by absolute name.
    scope = owner if isinstance(owner, Declaration) else None
    return rewrite_inline_links(text, scope, link_resolver) or None
