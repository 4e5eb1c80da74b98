"""Load declarative course definitions from bundled JSON resources."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from .models import Chapter, Course
from .sessions import generate_session, normalize_topic
from .sidebars import assign_offsets

logger = logging.getLogger(__name__)

CONTENT_PACKAGE = "coursenav.content.courses"


def _non_negative_int(raw: Any, what: str) -> int:
    """Read a JSON integer that must not be negative."""
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{what} must be an integer, got {raw!r}.")
    if raw < 0:
        raise ValueError(f"{what} must be non-negative, got {raw}.")
    return raw


def _require_fields(raw: Any, fields: tuple[str, ...], what: str) -> dict[str, Any]:
    """Check that a JSON value is an object carrying the required keys."""
    if not isinstance(raw, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(raw).__name__}.")
    missing = [name for name in fields if name not in raw]
    if missing:
        raise ValueError(f"{what} is missing required field(s): {', '.join(missing)}.")
    return raw


def _chapter_from_dict(course_id: str, position: int, raw: Any) -> Chapter:
    """Build a chapter from raw JSON content."""
    raw = _require_fields(raw, ("label",), f"Chapter {position} in course '{course_id}'")
    label = str(raw["label"])
    where = f"Chapter '{label}' in course '{course_id}'"
    offset = raw.get("offset")
    return Chapter(
        label=label,
        session_count=_non_negative_int(raw.get("sessions"), f"{where}: sessions"),
        offset=None if offset is None else _non_negative_int(offset, f"{where}: offset"),
        collapsed=bool(raw.get("collapsed", True)),
    )


def _course_from_dict(raw: Any, source: str) -> Course:
    """Build a course from raw JSON content."""
    raw = _require_fields(raw, ("id", "label"), f"Course definition in {source}")
    course_id = str(raw["id"])
    raw_chapters = raw.get("chapters", [])
    if not isinstance(raw_chapters, list):
        raise ValueError(f"Course '{course_id}': chapters must be a JSON array.")
    chapters = [_chapter_from_dict(course_id, position, item) for position, item in enumerate(raw_chapters, start=1)]
    if not chapters:
        raise ValueError(f"Course '{course_id}' has no chapters.")
    topic = str(raw.get("topic", course_id))
    if not normalize_topic(topic):
        raise ValueError(f"Course '{course_id}' has an empty topic.")
    return Course(
        id=course_id,
        label=str(raw["label"]),
        topic=topic,
        chapters=assign_offsets(chapters),
        collapsed=bool(raw.get("collapsed", True)),
    )


def _read_course(text: str, source: str) -> Course:
    logger.debug("Reading course definition from %s", source)
    return _course_from_dict(json.loads(text), source)


def load_courses() -> dict[str, Course]:
    """Load bundled courses."""
    entries = sorted(
        (entry for entry in resources.files(CONTENT_PACKAGE).iterdir() if entry.name.endswith(".json")),
        key=lambda entry: entry.name,
    )
    courses = [_read_course(entry.read_text(encoding="utf-8-sig"), entry.name) for entry in entries]
    return _collect(courses)


def load_courses_from_dir(path: Path) -> dict[str, Course]:
    """Load courses from a directory of ``*.json`` files."""
    courses = [
        _read_course(file_path.read_text(encoding="utf-8-sig"), str(file_path))
        for file_path in sorted(path.glob("*.json"))
    ]
    return _collect(courses)


def _collect(courses: list[Course]) -> dict[str, Course]:
    """Index courses by id and validate them as a set."""
    indexed: dict[str, Course] = {}
    for course in courses:
        if course.id in indexed:
            raise ValueError(f"Duplicate course id: {course.id}")
        indexed[course.id] = course
    _validate_unique_sessions(indexed)
    logger.info("Loaded %d courses", len(indexed))
    return indexed


def _validate_unique_sessions(courses: dict[str, Course]) -> None:
    """Validate that no two chapters link the same session folder."""
    seen: dict[str, str] = {}
    for course in courses.values():
        for chapter in course.chapters:
            for path in generate_session(chapter.session_count, course.topic, chapter.offset):
                owner = f"{course.id}:{chapter.label}"
                previous = seen.get(path)
                if previous is not None:
                    raise ValueError(f"Duplicate session path: {path} (in {previous} and {owner})")
                seen[path] = owner
