"""Resolution of references to documentation links."""

from render_types.declaration import Declaration
from render_types.fully_qualified_name import declaration_full_name
from render_types.link_target import LinkTarget


class LinkResolver:
    """Looks up the documentation page of declarations by full name."""

    def __init__(self, targets: dict[str, LinkTarget] | None = None) -> None:
        """Initialize the resolver with prebuilt link targets."""
        self.targets = targets or {}

    def lookup(self, full_name: str) -> LinkTarget | None:
        """Return the target for a full name, or None if it is not documented."""
        return self.targets.get(full_name)

    def generate_html_link(
        self,
        owner: Declaration | None,
        target: Declaration | None,
    ) -> LinkTarget | None:
        """Return the display name and link of ``target`` as seen from ``owner``.

        Links between declarations on the same page are reduced to the anchor.
        """
        if target is None:
            return None
        found = self.lookup(declaration_full_name(target))
        if found is None:
            return None

        owner_page = self._page_of(owner)
        if owner_page is not None and owner_page == found.page:
            _, _, anchor = found.link.partition("#")
            return LinkTarget(name=found.name, link=f"#{anchor}", page=found.page)
        return found

    def _page_of(self, declaration: Declaration | None) -> str | None:
        # Anonymous declarations live on the page of their nearest named parent.
        while declaration is not None:
            found = self.lookup(declaration_full_name(declaration))
            if found is not None:
                return found.page
            declaration = declaration.parent
        return None
