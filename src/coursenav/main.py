"""CLI entrypoint for building course sidebars and site configuration."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from . import __version__
from .content_loader import load_courses, load_courses_from_dir
from .models import Course
from .sessions import generate_session
from .sidebars import build_course_sidebars
from .site_config import DEFAULT_TITLE, build_site_config, render_json, write_site_config

PrintFn = Callable[[str], None]
EXIT_OK = 0
EXIT_USAGE = 2
EXIT_IO = 1

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coursenav", description="Course sidebar and site configuration builder")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    sessions = commands.add_parser("sessions", help="print session paths for one topic")
    sessions.add_argument("count", type=int)
    sessions.add_argument("topic")
    sessions.add_argument("--offset", type=int, default=None)

    sidebar = commands.add_parser("sidebar", help="print course sidebars as JSON")
    sidebar.add_argument("courses", nargs="*", metavar="COURSE")
    sidebar.add_argument("--content-dir", type=Path, default=None)

    config = commands.add_parser("config", help="print or write the site configuration")
    config.add_argument("--title", default=DEFAULT_TITLE)
    config.add_argument("--include-courses", action="store_true")
    config.add_argument("--content-dir", type=Path, default=None)
    config.add_argument("--output", type=Path, default=None)
    return parser


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr so JSON on stdout stays clean."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _load(content_dir: Path | None) -> dict[str, Course]:
    if content_dir is None:
        return load_courses()
    return load_courses_from_dir(content_dir)


def _select_courses(available: dict[str, Course], requested: list[str]) -> list[Course]:
    """Pick requested courses in the order asked, or all of them."""
    if not requested:
        return list(available.values())
    unknown = [course_id for course_id in requested if course_id not in available]
    if unknown:
        raise ValueError(f"Unknown course: {', '.join(unknown)} (available: {', '.join(sorted(available))})")
    return [available[course_id] for course_id in requested]


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "sessions":
            for path in generate_session(args.count, args.topic, args.offset):
                print_fn(path)
        elif args.command == "sidebar":
            courses = _select_courses(_load(args.content_dir), args.courses)
            sidebars = [group.to_dict() for group in build_course_sidebars(courses)]
            print_fn(render_json(sidebars).rstrip("\n"))
        else:
            courses = list(_load(args.content_dir).values()) if args.include_courses else None
            site = build_site_config(title=args.title, courses=courses)
            if args.output is None:
                print_fn(render_json(site.to_dict()).rstrip("\n"))
            else:
                written = write_site_config(site, args.output)
                print_fn(f"Wrote {written}")
    except ValueError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"coursenav: error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"coursenav: error: {exc}", file=sys.stderr)
        return EXIT_IO
    return EXIT_OK


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
