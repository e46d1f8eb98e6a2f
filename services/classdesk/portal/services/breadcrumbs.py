"""Breadcrumb trail resolution against the sidebar navigation tree."""

from __future__ import annotations

from typing import Iterable

from ..constants import ROUTES
from .nav_types import BreadcrumbEntry, FlattenedEntry, NavigationGroup

DASHBOARD_CRUMB = BreadcrumbEntry(title="Dashboard", url=ROUTES["dashboard"], is_current=False)


def flatten(groups: Iterable[NavigationGroup]) -> tuple[FlattenedEntry, ...]:
    """Linearize the two-level tree: each item followed by its children."""
    entries: list[FlattenedEntry] = []
    for group in groups or ():
        for item in group.items:
            entries.append(FlattenedEntry(node=item, group=group.name))
            for child in item.children:
                entries.append(FlattenedEntry(node=child, group=group.name, parent_url=item.url))
    return tuple(entries)


def _path_segments(path: str | None) -> list[str]:
    return [segment for segment in str(path or "").split("/") if segment]


def _first_by_url(entries: tuple[FlattenedEntry, ...]) -> dict[str, FlattenedEntry]:
    lookup: dict[str, FlattenedEntry] = {}
    for entry in entries:
        lookup.setdefault(entry.node.url, entry)
    return lookup


def resolve_trail(groups: Iterable[NavigationGroup], current_path: str | None) -> tuple[BreadcrumbEntry, ...]:
    """Map each prefix of `current_path` to a known node, skipping gaps.

    The Dashboard crumb always leads the trail, so the result is never empty.
    """
    lookup = _first_by_url(flatten(groups))
    segments = _path_segments(current_path)
    trail = [DASHBOARD_CRUMB]
    for k in range(1, len(segments) + 1):
        entry = lookup.get("/" + "/".join(segments[:k]))
        if entry is None:
            continue
        trail.append(
            BreadcrumbEntry(
                title=entry.node.title,
                url=entry.node.url,
                is_current=k == len(segments),
            )
        )
    return tuple(trail)


def find_entry(groups: Iterable[NavigationGroup], path: str | None) -> FlattenedEntry | None:
    segments = _path_segments(path)
    if not segments:
        return None
    return _first_by_url(flatten(groups)).get("/" + "/".join(segments))


__all__ = ["DASHBOARD_CRUMB", "find_entry", "flatten", "resolve_trail"]
