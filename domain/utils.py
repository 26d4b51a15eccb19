from __future__ import annotations

from domain.models import Identifier, Scalar

_LITERALS: dict[str, Scalar] = {"true": True, "false": False, "null": None}


def split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def parse_identifier(raw: str) -> Identifier:
    """Digits-only identifiers are integers; anything else stays a string."""
    return int(raw) if raw.isdigit() else raw


def parse_scalar(raw: str) -> Scalar:
    lowered = raw.lower()
    if lowered in _LITERALS:
        return _LITERALS[lowered]
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def parse_assignments(pairs: list[str] | tuple[str, ...]) -> dict[str, Scalar]:
    """Turn ``["name=Alice", "age=30"]`` into ``{"name": "Alice", "age": 30}``."""
    values: dict[str, Scalar] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Expected FIELD=VALUE, got {pair!r}")
        values[name] = parse_scalar(raw)
    return values
