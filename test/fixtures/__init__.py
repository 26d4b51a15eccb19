"""Test fixtures for integration and unit tests."""

import json
from pathlib import Path

from domain.models import Record

_FIXTURES_DIR = Path(__file__).parent


def fixture_path(*parts: str) -> Path:
    """Resolve a path relative to the test/fixtures/ directory."""
    return _FIXTURES_DIR.joinpath(*parts)


def write_config(directory: Path, **values: object) -> Path:
    """Write ``values`` as config.json into ``directory`` and return its path."""
    path = directory / "config.json"
    path.write_text(json.dumps(values), encoding="utf-8")
    return path


def sample_records() -> list[Record]:
    return [
        Record(id=1, fields={"name": "Alice", "last_name": "Smith", "age": 34}),
        Record(id=2, fields={"name": "Bob", "last_name": "Jones", "age": 27}),
        Record(id="c-3", fields={"name": "Carol", "last_name": "Smith", "active": False}),
    ]
