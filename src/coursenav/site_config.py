"""Documentation site configuration handed to the site framework."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from .models import AutogenerateGroup, Course, Integration, SidebarItem, SiteConfig
from .sidebars import build_course_sidebars

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Backend by Angela Yu"
MERMAID_THEME = "forest"

AUTOGENERATED_SECTIONS: tuple[AutogenerateGroup, ...] = (
    AutogenerateGroup(label="Express.js dan Backend Fundamentals", directory="Express.jsDanBackendFundamentals"),
    AutogenerateGroup(label="Introduction to APIs", directory="IntroductionToAPIs"),
)


def build_site_config(title: str = DEFAULT_TITLE, courses: Iterable[Course] | None = None) -> SiteConfig:
    """Assemble the site configuration.

    Autogenerated sections come first; course sidebars, when given, follow in
    the order supplied.
    """
    sidebar: list[SidebarItem] = list(AUTOGENERATED_SECTIONS)
    if courses is not None:
        sidebar.extend(build_course_sidebars(courses))
    integrations = (
        Integration("mermaid", {"theme": MERMAID_THEME}),
        Integration("starlight"),
    )
    return SiteConfig(title=title, sidebar=tuple(sidebar), integrations=integrations)


def render_json(data: object) -> str:
    """Serialize configuration data as indented JSON with a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_site_config(config: SiteConfig, path: Path) -> Path:
    """Write the configuration as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_json(config.to_dict()), encoding="utf-8")
    logger.info("Wrote site configuration to %s", path)
    return path
