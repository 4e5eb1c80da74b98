"""Compose course sidebars from chapter session counts."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from .models import Chapter, Course, SidebarGroup
from .sessions import generate_session

logger = logging.getLogger(__name__)


def assign_offsets(chapters: Sequence[Chapter]) -> tuple[Chapter, ...]:
    """Continue session numbering across chapters that omit an offset.

    The first chapter keeps ``offset=None`` unless one is given; each later
    chapter without an offset starts right after the previous chapter's last
    session.
    """
    resolved: list[Chapter] = []
    next_offset: int | None = None
    for chapter in chapters:
        if chapter.offset is None and next_offset is not None:
            chapter = replace(chapter, offset=next_offset)
        resolved.append(chapter)
        next_offset = (chapter.offset or 0) + chapter.session_count
    return tuple(resolved)


def build_chapter_group(chapter: Chapter, topic: str) -> SidebarGroup:
    """Build the sidebar group listing one chapter's session links."""
    items = generate_session(chapter.session_count, topic, chapter.offset)
    return SidebarGroup(label=chapter.label, items=tuple(items), collapsed=chapter.collapsed)


def build_course_sidebar(course: Course) -> SidebarGroup:
    """Build the sidebar group for a course with one subgroup per chapter."""
    groups = tuple(build_chapter_group(chapter, course.topic) for chapter in course.chapters)
    logger.debug("Built sidebar for course %s with %d chapters", course.id, len(groups))
    return SidebarGroup(label=course.label, items=groups, collapsed=course.collapsed)


def build_course_sidebars(courses: Iterable[Course]) -> list[SidebarGroup]:
    """Build sidebars for several courses, preserving their order."""
    return [build_course_sidebar(course) for course in courses]
