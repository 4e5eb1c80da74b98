"""Session path generation for lesson sidebars.

A topic such as ``"Learn API"`` owns a run of lesson folders named
``learnapi/sesi1``, ``learnapi/sesi2`` and so on. Chapters that continue an
earlier chapter pass an offset so numbering picks up where it stopped.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SESSION_PREFIX = "sesi"


class SessionInputError(ValueError):
    """Invalid argument passed to the session path generator."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


def normalize_topic(topic_name: str) -> str:
    """Lower-case a topic name and drop its spaces.

    Only the space character is removed; tabs, punctuation and other
    characters pass through unchanged.
    """
    if not isinstance(topic_name, str):
        raise SessionInputError("topic_name", f"expected str, got {type(topic_name).__name__}")
    return topic_name.lower().replace(" ", "")


def _require_non_negative_int(parameter: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SessionInputError(parameter, f"expected int, got {type(value).__name__}")
    if value < 0:
        raise SessionInputError(parameter, f"must be non-negative, got {value}")
    return value


def generate_session(count: int, topic_name: str, offset: int | None = None) -> list[str]:
    """Build ``count`` ordered session paths for one topic.

    Args:
        count: Number of sessions to emit.
        topic_name: Topic or folder name; normalized with ``normalize_topic``.
        offset: Sessions already covered by earlier chapters. ``None`` starts
            numbering at 1. ``0`` is a real offset and also starts at 1.

    Returns:
        Paths of the form ``"<topic>/sesi<index>"`` in ascending index order.

    Raises:
        SessionInputError: If any argument is malformed. Nothing is generated.
    """
    count = _require_non_negative_int("count", count)
    start = 1 if offset is None else 1 + _require_non_negative_int("offset", offset)
    topic = normalize_topic(topic_name)
    if not topic:
        raise SessionInputError("topic_name", "must contain at least one non-space character")

    paths = [f"{topic}/{SESSION_PREFIX}{index}" for index in range(start, start + count)]
    logger.debug("Generated %d session paths for %r starting at %d", count, topic, start)
    return paths
