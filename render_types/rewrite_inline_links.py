"""Logic for rewriting TSDoc ``{@link}`` tags to Markdown links."""

import re

from render_types.declaration import Declaration
from render_types.fully_qualified_name import declaration_full_name
from render_types.link_resolver import LinkResolver

# {@link Target}, {@link Target|label}, {@link Target label}
LINK_TAG_RE = re.compile(r"\{@link(?:code|plain)?\s+([^}\s|]+)(?:\s*\|\s*|\s+)?([^}]*)\}")


def rewrite_inline_links(
    text: str,
    owner: Declaration | None,
    link_resolver: LinkResolver | None,
) -> str:
    """Rewrite inline link tags relative to ``owner``."""
    if not text:
        return ""

    def repl(m: re.Match) -> str:
        target = m.group(1)
        label = m.group(2).strip()
        found = _resolve(target, owner, link_resolver)
        if not found:
            return f"`{label or target}`"
        name, link = found
        return f"[{label or name}]({link})"

    return LINK_TAG_RE.sub(repl, text)


def _resolve(
    target: str,
    owner: Declaration | None,
    link_resolver: LinkResolver | None,
) -> tuple[str, str] | None:
    """Find a link for ``target``, trying the owner's namespaces innermost first."""
    if link_resolver is None:
        return None

    candidates = []
    scope = owner.parent if owner is not None else None
    while scope is not None:
        prefix = declaration_full_name(scope)
        if prefix:
            candidates.append(f"{prefix}.{target}")
        scope = scope.parent
    candidates.append(target)

    for candidate in candidates:
        t = link_resolver.lookup(candidate)
        if t:
            return t.name, t.link
    return None
