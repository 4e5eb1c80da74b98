from __future__ import annotations

import json
import shutil
import sys
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

SCRATCH = ROOT / ".tmp_pytest"


@pytest.fixture(name="tmp_path")
def workspace_tmp_path() -> Iterator[Path]:
    """Per-test scratch directory kept under the checkout in ``.tmp_pytest/``."""
    path = SCRATCH / uuid4().hex
    path.mkdir(parents=True)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        if SCRATCH.exists() and not any(SCRATCH.iterdir()):
            SCRATCH.rmdir()


@pytest.fixture
def write_course(tmp_path: Path):
    """Write one course definition into a fresh content directory."""
    root = tmp_path / "courses"
    root.mkdir()

    def _write(name: str, payload: dict) -> Path:
        (root / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")
        return root

    return _write
