"""Logic for mapping fully-qualified names to documentation links."""

from render_types.declaration import Declaration
from render_types.iter_documented_declarations import iter_documented_declarations
from render_types.link_target import LinkTarget
from render_types.page_path_for_namespace import page_path_for_namespace


def build_link_targets(
    project: Declaration,
    api_root: str,
    strip_prefix: str = "",
    anchor_prefix: str = "type-",
) -> dict[str, LinkTarget]:
    """Build a map of full names to link targets for every documented declaration."""
    targets: dict[str, LinkTarget] = {}
    for full_name, declaration in iter_documented_declarations(project):
        namespace, _, _ = full_name.rpartition(".")
        page = page_path_for_namespace(api_root, namespace, strip_prefix)

        title = full_name
        if strip_prefix and title.startswith(strip_prefix):
            title = title[len(strip_prefix) :]

        link = f"{page}#{anchor_prefix}{declaration.name}"
        targets[full_name] = LinkTarget(name=title, link=link, page=page)
    return targets
