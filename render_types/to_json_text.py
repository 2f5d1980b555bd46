"""Logic for serializing values to JSON text."""

import json
import re
from typing import Any

# A lone surrogate cannot be encoded as UTF-8.
LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def to_json_text(value: Any, indent: int | None = None) -> str:
    """Serialize ``value`` keeping non-ASCII text but escaping lone surrogates."""
    text = json.dumps(value, indent=indent, ensure_ascii=False)
    return LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
