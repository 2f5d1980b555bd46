"""Data models for representing documentation link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Display name and page of a documented declaration."""

    name: str  # e.g. events.Event
    link: str  # e.g. /docs/extensions/reference/events/#type-Event
    page: str  # page part of ``link``, used for same-page anchors
