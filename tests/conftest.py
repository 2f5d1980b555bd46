"""Shared fixtures: a small TypeDoc project in the legacy JSON format."""

import copy
from typing import Any

import pytest

TYPEDOC_PROJECT: dict[str, Any] = {
    "id": 0,
    "name": "chrome-types",
    "kind": 0,
    "flags": {},
    "children": [
        {
            "id": 1,
            "name": "chrome",
            "kind": 2,
            "kindString": "Namespace",
            "flags": {},
            "children": [
                {
                    "id": 2,
                    "name": "tabs",
                    "kind": 2,
                    "kindString": "Namespace",
                    "flags": {},
                    "children": [
                        {
                            "id": 3,
                            "name": "Tab",
                            "kind": 256,
                            "kindString": "Interface",
                            "flags": {},
                            "comment": {"shortText": "A browser tab."},
                            "children": [
                                {
                                    "id": 4,
                                    "name": "id",
                                    "kind": 1024,
                                    "kindString": "Property",
                                    "flags": {"isOptional": True},
                                    "comment": {"shortText": "The ID of the tab."},
                                    "type": {"type": "intrinsic", "name": "number"},
                                },
                                {
                                    "id": 5,
                                    "name": "status",
                                    "kind": 1024,
                                    "kindString": "Property",
                                    "flags": {},
                                    "type": {
                                        "type": "union",
                                        "types": [
                                            {"type": "stringLiteral", "value": "loading"},
                                            {"type": "stringLiteral", "value": "complete"},
                                        ],
                                    },
                                },
                            ],
                        },
                        {
                            "id": 6,
                            "name": "query",
                            "kind": 64,
                            "kindString": "Function",
                            "flags": {},
                            "signatures": [
                                {
                                    "id": 7,
                                    "name": "query",
                                    "kind": 4096,
                                    "kindString": "Call signature",
                                    "comment": {
                                        "shortText": "Gets tabs.",
                                        "returns": "Matching tabs.",
                                    },
                                    "parameters": [
                                        {
                                            "id": 8,
                                            "name": "queryInfo",
                                            "kind": 32768,
                                            "kindString": "Parameter",
                                            "flags": {},
                                            "type": {
                                                "type": "reflection",
                                                "declaration": {
                                                    "id": 9,
                                                    "name": "__type",
                                                    "kind": 65536,
                                                    "kindString": "Type literal",
                                                    "flags": {},
                                                    "children": [
                                                        {
                                                            "id": 10,
                                                            "name": "active",
                                                            "kind": 1024,
                                                            "kindString": "Property",
                                                            "flags": {"isOptional": True},
                                                            "type": {
                                                                "type": "intrinsic",
                                                                "name": "boolean",
                                                            },
                                                        }
                                                    ],
                                                },
                                            },
                                        }
                                    ],
                                    "type": {
                                        "type": "reference",
                                        "name": "Promise",
                                        "typeArguments": [
                                            {
                                                "type": "array",
                                                "elementType": {
                                                    "type": "reference",
                                                    "id": 3,
                                                    "name": "Tab",
                                                },
                                            }
                                        ],
                                    },
                                }
                            ],
                        },
                        {
                            "id": 11,
                            "name": "onCreated",
                            "kind": 32,
                            "kindString": "Variable",
                            "flags": {},
                            "comment": {"shortText": "Fired when a tab is created."},
                            "type": {
                                "type": "reference",
                                "name": "Event",
                                "qualifiedName": "chrome.events.Event",
                                "typeArguments": [
                                    {
                                        "type": "reflection",
                                        "declaration": {
                                            "id": 12,
                                            "name": "__type",
                                            "kind": 65536,
                                            "kindString": "Type literal",
                                            "flags": {},
                                            "signatures": [
                                                {
                                                    "id": 13,
                                                    "name": "__call",
                                                    "kind": 4096,
                                                    "kindString": "Call signature",
                                                    "parameters": [
                                                        {
                                                            "id": 14,
                                                            "name": "tab",
                                                            "kind": 32768,
                                                            "kindString": "Parameter",
                                                            "flags": {},
                                                            "type": {
                                                                "type": "reference",
                                                                "id": 3,
                                                                "name": "Tab",
                                                            },
                                                        }
                                                    ],
                                                    "type": {
                                                        "type": "intrinsic",
                                                        "name": "void",
                                                    },
                                                }
                                            ],
                                        },
                                    }
                                ],
                            },
                        },
                    ],
                },
                {
                    "id": 15,
                    "name": "runtime",
                    "kind": 2,
                    "kindString": "Namespace",
                    "flags": {},
                    "children": [
                        {
                            "id": 16,
                            "name": "getTab",
                            "kind": 64,
                            "kindString": "Function",
                            "flags": {},
                            "comment": {"shortText": "See {@link tabs.Tab}."},
                            "signatures": [
                                {
                                    "id": 17,
                                    "name": "getTab",
                                    "kind": 4096,
                                    "kindString": "Call signature",
                                    "type": {"type": "reference", "id": 3, "name": "Tab"},
                                }
                            ],
                        }
                    ],
                },
            ],
        }
    ],
}


@pytest.fixture
def typedoc_raw() -> dict[str, Any]:
    """Return a fresh copy of the sample TypeDoc JSON document."""
    return copy.deepcopy(TYPEDOC_PROJECT)
