"""Declarative records for course sidebars and site configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Chapter:
    """A run of consecutive sessions shown as one sidebar group."""

    label: str
    session_count: int
    offset: int | None = None
    collapsed: bool = True


@dataclass(frozen=True)
class Course:
    """A course module whose sessions share one topic folder."""

    id: str
    label: str
    topic: str
    chapters: tuple[Chapter, ...]
    collapsed: bool = True


@dataclass(frozen=True)
class AutogenerateGroup:
    """Sidebar group filled by the site framework from a content directory."""

    label: str
    directory: str
    collapsed: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "collapsed": self.collapsed, "autogenerate": {"directory": self.directory}}


@dataclass(frozen=True)
class SidebarGroup:
    """Sidebar group with explicit link slugs or nested groups."""

    label: str
    items: tuple[SidebarItem, ...]
    collapsed: bool = True

    def to_dict(self) -> dict[str, Any]:
        items = [item if isinstance(item, str) else item.to_dict() for item in self.items]
        return {"label": self.label, "collapsed": self.collapsed, "items": items}


SidebarItem = Union[str, SidebarGroup, AutogenerateGroup]


@dataclass(frozen=True)
class Integration:
    """One site framework integration and the options it is called with."""

    name: str
    options: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {self.name: dict(self.options)}


@dataclass(frozen=True)
class SiteConfig:
    """Top-level documentation site configuration."""

    title: str
    sidebar: tuple[SidebarItem, ...]
    integrations: tuple[Integration, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as JSON-ready data.

        The sidebar is attached to the ``starlight`` integration, which is
        where the site framework reads it from.
        """
        sidebar = [item if isinstance(item, str) else item.to_dict() for item in self.sidebar]
        integrations: list[dict[str, Any]] = []
        for integration in self.integrations:
            entry = integration.to_dict()
            if integration.name == "starlight":
                entry[integration.name].update({"title": self.title, "sidebar": sidebar})
            integrations.append(entry)
        return {"title": self.title, "sidebar": sidebar, "integrations": integrations}
