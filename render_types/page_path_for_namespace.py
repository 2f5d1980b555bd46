"""Utility for determining the documentation page of a namespace."""

import re

# Conservative: keep letters, digits, underscore, dash.
PATH_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def page_path_for_namespace(api_root: str, namespace: str, strip_prefix: str = "") -> str:
    """Generate the page path for a namespace.

    ``chrome.devtools.panels`` with prefix ``chrome.`` -> ``{api_root}/devtools_panels/``
    """
    if strip_prefix and namespace.startswith(strip_prefix):
        namespace = namespace[len(strip_prefix) :]
    slug = PATH_SAFE_RE.sub("-", namespace.replace(".", "_")).strip("-")
    if not slug:
        return f"{api_root.rstrip('/')}/"
    return f"{api_root.rstrip('/')}/{slug}/"
