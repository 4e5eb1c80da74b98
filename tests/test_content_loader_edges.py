from pathlib import Path

from coursenav.content_loader import load_courses_from_dir


def _expect_error(root: Path, fragment: str) -> None:
    try:
        load_courses_from_dir(root)
        raise AssertionError(f"Expected ValueError containing {fragment!r}.")
    except ValueError as exc:
        assert fragment in str(exc)


def test_course_without_chapters_raises(write_course) -> None:
    root = write_course("empty", {"id": "empty", "label": "Empty", "chapters": []})
    _expect_error(root, "has no chapters")


def test_duplicate_course_id_in_dir_raises(write_course) -> None:
    write_course("a", {"id": "same", "label": "A", "topic": "a", "chapters": [{"label": "I", "sessions": 1}]})
    root = write_course("b", {"id": "same", "label": "B", "topic": "b", "chapters": [{"label": "I", "sessions": 1}]})
    _expect_error(root, "Duplicate course id")


def test_negative_session_count_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": [{"label": "I", "sessions": -1}]})
    _expect_error(root, "must be non-negative")


def test_non_integer_session_count_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": [{"label": "I", "sessions": "4"}]})
    _expect_error(root, "must be an integer")


def test_missing_session_count_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": [{"label": "I"}]})
    _expect_error(root, "sessions must be an integer")


def test_blank_topic_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "topic": "  ", "chapters": [{"label": "I", "sessions": 1}]})
    _expect_error(root, "empty topic")


def test_overlapping_chapters_raise(write_course) -> None:
    payload = {
        "id": "m",
        "label": "M",
        "chapters": [{"label": "I", "sessions": 4}, {"label": "II", "sessions": 2, "offset": 3}],
    }
    root = write_course("m", payload)
    _expect_error(root, "Duplicate session path: m/sesi4")


def test_courses_sharing_topic_must_not_overlap(write_course) -> None:
    write_course("a", {"id": "a", "label": "A", "topic": "Learn API", "chapters": [{"label": "I", "sessions": 2}]})
    root = write_course("b", {"id": "b", "label": "B", "topic": "learnapi", "chapters": [{"label": "I", "sessions": 1}]})
    _expect_error(root, "learnapi/sesi1")


def test_empty_directory_loads_nothing(tmp_path: Path) -> None:
    assert load_courses_from_dir(tmp_path) == {}


def test_course_missing_label_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "chapters": [{"label": "I", "sessions": 1}]})
    _expect_error(root, "missing required field(s): label")


def test_course_missing_id_names_source_file(write_course) -> None:
    root = write_course("nameless", {"label": "M", "chapters": [{"label": "I", "sessions": 1}]})
    _expect_error(root, "nameless.json is missing required field(s): id")


def test_chapter_that_is_not_an_object_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": [4]})
    _expect_error(root, "Chapter 1 in course 'm' must be a JSON object, got int")


def test_chapter_missing_label_raises(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": [{"label": "I", "sessions": 1}, {"sessions": 2}]})
    _expect_error(root, "Chapter 2 in course 'm' is missing required field(s): label")


def test_chapters_that_are_not_a_list_raise(write_course) -> None:
    root = write_course("m", {"id": "m", "label": "M", "chapters": {"label": "I", "sessions": 1}})
    _expect_error(root, "chapters must be a JSON array")


def test_top_level_array_raises(tmp_path: Path) -> None:
    (tmp_path / "list.json").write_text("[1]", encoding="utf-8")
    _expect_error(tmp_path, "must be a JSON object, got list")
